"""Watched-channel handler — filter → dispatch → report for one inbound message."""

import sys
from typing import List, Optional

from itg_buddy.domain.dispatch import SongDispatcher
from itg_buddy.domain.filter import qualifying_attachments, to_candidate
from itg_buddy.domain.models import StatusMessage
from itg_buddy.domain.reporter import Reporter
from itg_buddy.ports.inbound import IncomingMessage
from itg_buddy.ports.outbound import ReplyPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class AddSongHandler:
    """Processes .zip attachments posted in the watched channel.

    Candidates are dispatched and reported one at a time in attachment order.
    A failed candidate still gets its own reply and does not stop the rest.
    """

    def __init__(
        self,
        watched_channel_id: str,
        dispatcher: SongDispatcher,
        reporter: Optional[Reporter] = None,
    ):
        self.watched_channel_id = watched_channel_id
        self.dispatcher = dispatcher
        self.reporter = reporter or Reporter()

    async def handle(self, message: IncomingMessage, target: ReplyPort) -> List[StatusMessage]:
        """Return the status of every dispatched candidate (empty if out of scope)."""
        statuses: List[StatusMessage] = []
        for attachment in qualifying_attachments(message, self.watched_channel_id):
            _log(f"Calling add-song: {attachment.filename}")
            status = await self.dispatcher.dispatch(to_candidate(attachment))
            statuses.append(status)
            await self.reporter.report(target, status)
        return statuses

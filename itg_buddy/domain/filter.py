"""Attachment filter — decides which attachments of a message trigger add-song.

Pure domain logic, no framework dependencies.
"""

from typing import List

from itg_buddy.domain.models import Attachment, CandidateItem
from itg_buddy.ports.inbound import IncomingMessage

# Case-sensitive on purpose: "song.ZIP" is not picked up.
ACCEPTED_SUFFIX = ".zip"


def is_accepted(filename: str, suffix: str = ACCEPTED_SUFFIX) -> bool:
    return filename.endswith(suffix)


def qualifying_attachments(
    message: IncomingMessage,
    watched_channel_id: str,
    suffix: str = ACCEPTED_SUFFIX,
) -> List[Attachment]:
    """Attachments that trigger add-song, in the order they were posted.

    Messages from any other channel, or without attachments, yield nothing.
    """
    if message.channel_id != watched_channel_id or not message.attachments:
        return []
    return [a for a in message.attachments if is_accepted(a.filename, suffix)]


def to_candidate(attachment: Attachment) -> CandidateItem:
    return CandidateItem(source_url=attachment.url, overwrite=True)


def candidates_from(
    message: IncomingMessage,
    watched_channel_id: str,
    suffix: str = ACCEPTED_SUFFIX,
) -> List[CandidateItem]:
    """One CandidateItem per qualifying attachment, in attachment order."""
    return [
        to_candidate(a)
        for a in qualifying_attachments(message, watched_channel_id, suffix)
    ]

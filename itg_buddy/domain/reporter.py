"""Reporter — best-effort delivery of status messages."""

import sys

from itg_buddy.domain.errors import DeliveryError
from itg_buddy.domain.models import StatusMessage
from itg_buddy.ports.outbound import ReplyPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class Reporter:
    """Sends a StatusMessage to its reply target.

    Delivery failures are logged and dropped: they never propagate to the
    event or command handler and never change the dispatch outcome.
    """

    async def report(self, target: ReplyPort, message: StatusMessage) -> bool:
        """Return True if the platform accepted the reply."""
        try:
            await target.reply(message.text, failed=not message.success)
            return True
        except DeliveryError as e:
            _log(f"[reporter] failed to send message: {e}")
        except Exception as e:
            _log(f"[reporter] unexpected error sending message ({type(e).__name__}): {e}")
        return False

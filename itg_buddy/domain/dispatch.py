"""Add-song dispatch — turns a CandidateItem into one AddSong call and a status line.

Every failure is caught here and converted into a StatusMessage, so callers
(message handler, commands) always get exactly one result per item.
"""

import functools
import sys
from typing import Optional

from itg_buddy.domain.errors import EndpointCallError, EndpointConnectionError
from itg_buddy.domain.models import AddSongResult, CandidateItem, StatusMessage
from itg_buddy.ports.outbound import EndpointConnector

DEFAULT_CONNECT_TIMEOUT = 5.0

ADD_SONG_FAILED_TEXT = "Error adding song."


def _log(msg: str):
    print(msg, file=sys.stderr)


def format_success(result: AddSongResult) -> StatusMessage:
    return StatusMessage(
        text=f"Added {result.added_song} to {result.destination}.",
        success=True,
    )


def format_connect_failure(error: Exception) -> StatusMessage:
    return StatusMessage(
        text=f"Failed to connect to the song service: {error}",
        success=False,
    )


def format_call_failure() -> StatusMessage:
    return StatusMessage(text=ADD_SONG_FAILED_TEXT, success=False)


def _default_connector(call_timeout: Optional[float] = None) -> EndpointConnector:
    # Imported lazily so the domain layer stays importable without grpc.
    from itg_buddy.adapters.rpc.endpoint import ItgEndpoint

    return functools.partial(ItgEndpoint.connect, call_timeout=call_timeout)


class SongDispatcher:
    """Runs the add-song pipeline against a fixed endpoint address.

    Each dispatch opens its own endpoint connection and closes it afterwards;
    no connection is shared between concurrent tasks.
    """

    def __init__(
        self,
        endpoint_address: str,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        connector: Optional[EndpointConnector] = None,
        call_timeout: Optional[float] = None,
    ):
        self.endpoint_address = endpoint_address
        self.connect_timeout = connect_timeout
        self.call_timeout = call_timeout
        self._connect = connector or _default_connector(call_timeout)

    async def dispatch(self, item: CandidateItem) -> StatusMessage:
        """Connect, call AddSong once, and describe the outcome."""
        try:
            endpoint = await self._connect(self.endpoint_address, self.connect_timeout)
        except EndpointConnectionError as e:
            _log(f"[add-song] connect to {self.endpoint_address} failed: {e}")
            return format_connect_failure(e)
        except Exception as e:
            _log(f"[add-song] unexpected connect error ({type(e).__name__}): {e}")
            return format_connect_failure(e)

        async with endpoint:
            try:
                result = await endpoint.add_song(item.source_url, item.overwrite)
            except EndpointCallError as e:
                _log(f"[add-song] AddSong({item.source_url}) failed: {e}")
                return format_call_failure()
            except Exception as e:
                _log(f"[add-song] unexpected AddSong error ({type(e).__name__}): {e}")
                return format_call_failure()

        _log(f"[add-song] added {result.added_song} -> {result.destination}")
        return format_success(result)

    async def run_command(self, url: str) -> StatusMessage:
        """Command entry point: dispatch a single user-supplied URL."""
        return await self.dispatch(CandidateItem(source_url=url.strip(), overwrite=True))

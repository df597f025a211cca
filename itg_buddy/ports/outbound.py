"""Outbound ports — interfaces for external system adapters."""

from typing import Awaitable, Callable, Protocol, runtime_checkable

from itg_buddy.domain.models import AddSongResult


@runtime_checkable
class SongEndpointPort(Protocol):
    """Connected client for the SimfileManagement service.

    Used as an async context manager so the underlying channel is released
    after one logical operation.
    """

    async def add_song(self, path_or_url: str, overwrite: bool) -> AddSongResult: ...

    async def close(self) -> None: ...

    async def __aenter__(self) -> "SongEndpointPort": ...

    async def __aexit__(self, *exc) -> None: ...


# (endpoint_address, timeout_seconds) -> connected endpoint
EndpointConnector = Callable[[str, float], Awaitable[SongEndpointPort]]


@runtime_checkable
class ReplyPort(Protocol):
    """Destination a status message is sent to.

    Implementations raise DeliveryError when the platform rejects the send.
    """

    async def reply(self, text: str, *, failed: bool = False) -> None: ...

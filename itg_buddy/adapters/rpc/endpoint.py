"""gRPC client for the SimfileManagement service."""

import asyncio
from typing import Optional, Tuple

import grpc
from google.protobuf.message import DecodeError

from itg_buddy.adapters.rpc.proto import ADD_SONG_METHOD, AddSongRequest, AddSongResponse
from itg_buddy.domain.dispatch import DEFAULT_CONNECT_TIMEOUT
from itg_buddy.domain.errors import EndpointCallError, EndpointConnectionError
from itg_buddy.domain.models import AddSongResult


def normalize_target(address: str) -> Tuple[str, bool]:
    """Turn "http://host:port" style addresses into a gRPC target.

    Returns (target, use_tls).
    """
    address = address.strip()
    secure = False
    if address.startswith("https://"):
        secure = True
        address = address[len("https://"):]
    elif address.startswith("http://"):
        address = address[len("http://"):]
    return address.rstrip("/"), secure


class ItgEndpoint:
    """Connected SimfileManagement client (implements SongEndpointPort).

    Intended for a single AddSong call; use as an async context manager so
    the channel is closed afterwards.
    """

    def __init__(
        self,
        channel: grpc.aio.Channel,
        target: str,
        call_timeout: Optional[float] = None,
    ):
        self._channel = channel
        self.target = target
        self.call_timeout = call_timeout
        self._add_song = channel.unary_unary(
            ADD_SONG_METHOD,
            request_serializer=AddSongRequest.SerializeToString,
            response_deserializer=AddSongResponse.FromString,
        )

    @classmethod
    async def connect(
        cls,
        address: str,
        timeout: float = DEFAULT_CONNECT_TIMEOUT,
        call_timeout: Optional[float] = None,
    ) -> "ItgEndpoint":
        """Open a channel and wait until it is ready.

        Raises EndpointConnectionError if the address is empty or the channel
        is not ready within `timeout` seconds. `call_timeout` is the deadline
        applied to each AddSong call (None waits for the transport).
        """
        target, secure = normalize_target(address)
        if not target:
            raise EndpointConnectionError(f"invalid endpoint address {address!r}")

        if secure:
            channel = grpc.aio.secure_channel(target, grpc.ssl_channel_credentials())
        else:
            channel = grpc.aio.insecure_channel(target)

        try:
            await asyncio.wait_for(channel.channel_ready(), timeout)
        except asyncio.TimeoutError as e:
            await channel.close()
            raise EndpointConnectionError(
                f"{target} not reachable within {timeout:g}s"
            ) from e
        except BaseException:
            await channel.close()
            raise
        return cls(channel, target, call_timeout=call_timeout)

    async def add_song(self, path_or_url: str, overwrite: bool) -> AddSongResult:
        request = AddSongRequest(path_or_url=path_or_url, overwrite=overwrite)
        try:
            response = await self._add_song(request, timeout=self.call_timeout)
        except grpc.aio.AioRpcError as e:
            raise EndpointCallError(f"{e.code().name}: {e.details()}") from e
        except DecodeError as e:
            raise EndpointCallError(f"malformed AddSong response: {e}") from e
        # grpc returns None when the response deserializer fails
        if response is None:
            raise EndpointCallError("malformed AddSong response")
        return AddSongResult(
            added_song=response.added_song,
            destination=response.destination,
        )

    async def close(self) -> None:
        await self._channel.close()

    async def __aenter__(self) -> "ItgEndpoint":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

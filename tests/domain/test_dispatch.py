"""Tests for SongDispatcher — stub endpoints, no network."""

import asyncio

import pytest

from itg_buddy.domain.dispatch import ADD_SONG_FAILED_TEXT, SongDispatcher
from itg_buddy.domain.errors import EndpointCallError, EndpointConnectionError
from itg_buddy.domain.models import AddSongResult, CandidateItem, StatusMessage


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class StubEndpoint:
    """In-memory SongEndpointPort."""

    def __init__(self, result=None, error=None):
        self.result = result or AddSongResult(added_song="Song A", destination="Pack/Song A")
        self.error = error
        self.calls = []
        self.closed = False

    async def add_song(self, path_or_url, overwrite):
        self.calls.append((path_or_url, overwrite))
        if self.error:
            raise self.error
        return self.result

    async def close(self):
        self.closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()


def _connector(endpoint=None, error=None, seen=None):
    async def connect(address, timeout):
        if seen is not None:
            seen.append((address, timeout))
        if error:
            raise error
        return endpoint

    return connect


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_success_message():
    endpoint = StubEndpoint()
    dispatcher = SongDispatcher("localhost:50051", connector=_connector(endpoint))

    status = await dispatcher.dispatch(CandidateItem(source_url="https://x/a.zip"))

    assert status == StatusMessage(text="Added Song A to Pack/Song A.", success=True)
    assert endpoint.calls == [("https://x/a.zip", True)]
    assert endpoint.closed is True


@pytest.mark.asyncio
async def test_endpoint_address_and_timeout_passed_through():
    seen = []
    dispatcher = SongDispatcher(
        "songs.internal:6000",
        connect_timeout=1.5,
        connector=_connector(StubEndpoint(), seen=seen),
    )
    await dispatcher.dispatch(CandidateItem(source_url="u"))
    assert seen == [("songs.internal:6000", 1.5)]


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_connection_failure_includes_detail():
    dispatcher = SongDispatcher(
        "localhost:1",
        connector=_connector(error=EndpointConnectionError("localhost:1 not reachable within 5s")),
    )
    status = await dispatcher.dispatch(CandidateItem(source_url="u"))

    assert status.success is False
    assert "Failed to connect" in status.text
    assert "localhost:1 not reachable" in status.text


@pytest.mark.asyncio
async def test_unexpected_connect_error_is_contained():
    dispatcher = SongDispatcher("x", connector=_connector(error=ValueError("bad target")))
    status = await dispatcher.dispatch(CandidateItem(source_url="u"))
    assert status.success is False
    assert "bad target" in status.text


@pytest.mark.asyncio
async def test_call_failure_is_generic():
    endpoint = StubEndpoint(error=EndpointCallError("INTERNAL: disk full"))
    dispatcher = SongDispatcher("x", connector=_connector(endpoint))

    status = await dispatcher.dispatch(CandidateItem(source_url="u"))

    assert status == StatusMessage(text=ADD_SONG_FAILED_TEXT, success=False)
    assert "disk full" not in status.text
    assert endpoint.closed is True


@pytest.mark.asyncio
async def test_unexpected_call_error_is_contained():
    endpoint = StubEndpoint(error=RuntimeError("boom"))
    dispatcher = SongDispatcher("x", connector=_connector(endpoint))
    status = await dispatcher.dispatch(CandidateItem(source_url="u"))
    assert status.text == ADD_SONG_FAILED_TEXT
    assert endpoint.closed is True


@pytest.mark.asyncio
async def test_cancellation_propagates_and_closes_channel():
    endpoint = StubEndpoint(error=asyncio.CancelledError())
    dispatcher = SongDispatcher("x", connector=_connector(endpoint))

    with pytest.raises(asyncio.CancelledError):
        await dispatcher.dispatch(CandidateItem(source_url="u"))
    assert endpoint.closed is True


# ---------------------------------------------------------------------------
# Command entry point
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_command_matches_dispatch():
    url = "http://example.com/song.zip"
    endpoint = StubEndpoint()
    dispatcher = SongDispatcher("x", connector=_connector(endpoint))

    via_command = await dispatcher.run_command(url)
    via_dispatch = await dispatcher.dispatch(CandidateItem(source_url=url, overwrite=True))

    assert via_command == via_dispatch
    assert endpoint.calls == [(url, True), (url, True)]


@pytest.mark.asyncio
async def test_command_failure_is_a_result_not_an_exception():
    dispatcher = SongDispatcher(
        "x", connector=_connector(error=EndpointConnectionError("refused"))
    )
    status = await dispatcher.run_command("http://example.com/song.zip")
    assert status.success is False

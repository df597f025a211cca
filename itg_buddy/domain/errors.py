"""Domain error taxonomy.

Adapters translate library exceptions into these at their boundary, so the
domain never imports grpc or discord.
"""


class EndpointError(Exception):
    """Base class for failures talking to the song-management service."""


class EndpointConnectionError(EndpointError):
    """Endpoint unreachable or the channel never became ready."""


class EndpointCallError(EndpointError):
    """The AddSong call failed after the channel was connected."""


class DeliveryError(Exception):
    """Sending a reply back to the chat failed."""

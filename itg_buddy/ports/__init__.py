"""Port interfaces (Hexagonal Architecture)."""

from itg_buddy.ports.inbound import IncomingMessage
from itg_buddy.ports.outbound import EndpointConnector, ReplyPort, SongEndpointPort

__all__ = [
    "IncomingMessage",
    "EndpointConnector",
    "ReplyPort",
    "SongEndpointPort",
]

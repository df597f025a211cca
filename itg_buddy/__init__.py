"""ITG Buddy — Discord relay for the SimfileManagement AddSong service."""

__version__ = "0.1.0"

from itg_buddy.config import AppConfig
from itg_buddy.domain import (
    AddSongHandler,
    AddSongResult,
    Attachment,
    CandidateItem,
    DeliveryError,
    EndpointCallError,
    EndpointConnectionError,
    EndpointError,
    Reporter,
    SongDispatcher,
    StatusMessage,
    candidates_from,
)
from itg_buddy.ports import IncomingMessage

__all__ = [
    "AppConfig",
    "AddSongHandler",
    "AddSongResult",
    "Attachment",
    "CandidateItem",
    "DeliveryError",
    "EndpointCallError",
    "EndpointConnectionError",
    "EndpointError",
    "IncomingMessage",
    "Reporter",
    "SongDispatcher",
    "StatusMessage",
    "candidates_from",
]

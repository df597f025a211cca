"""Domain layer — pure Python, no framework dependencies."""

from itg_buddy.domain.dispatch import SongDispatcher
from itg_buddy.domain.errors import (
    DeliveryError,
    EndpointCallError,
    EndpointConnectionError,
    EndpointError,
)
from itg_buddy.domain.filter import ACCEPTED_SUFFIX, candidates_from
from itg_buddy.domain.handler import AddSongHandler
from itg_buddy.domain.models import AddSongResult, Attachment, CandidateItem, StatusMessage
from itg_buddy.domain.reporter import Reporter

__all__ = [
    "ACCEPTED_SUFFIX",
    "AddSongHandler",
    "AddSongResult",
    "Attachment",
    "CandidateItem",
    "DeliveryError",
    "EndpointCallError",
    "EndpointConnectionError",
    "EndpointError",
    "Reporter",
    "SongDispatcher",
    "StatusMessage",
    "candidates_from",
]

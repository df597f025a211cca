"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Attachment:
    """File attached to an inbound chat message."""

    filename: str
    url: str


@dataclass(frozen=True)
class CandidateItem:
    """One attachment or URL argument that qualifies for add-song."""

    source_url: str
    overwrite: bool = True


@dataclass(frozen=True)
class AddSongResult:
    """Decoded AddSong response."""

    added_song: str
    destination: str


@dataclass(frozen=True)
class StatusMessage:
    """Human-readable outcome of one dispatch."""

    text: str
    success: bool

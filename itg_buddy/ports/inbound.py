"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass, field
from typing import List

from itg_buddy.domain.models import Attachment


@dataclass
class IncomingMessage:
    """Discord/CLI-agnostic message representation."""

    channel_id: str
    content: str = ""
    author_name: str = ""
    attachments: List[Attachment] = field(default_factory=list)

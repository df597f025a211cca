"""Configuration loaded from the environment and .env."""

import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from itg_buddy.domain.dispatch import DEFAULT_CONNECT_TIMEOUT

# Resolved against the working directory, the same file `itg-buddy setup` writes.
ENV_FILE = os.getenv("ITG_BUDDY_ENV_FILE", ".env")

load_dotenv(ENV_FILE)

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_ENDPOINT_ADDRESS = "localhost:50051"
DEFAULT_COMMAND_PREFIX = "!"

# (env var, description shown by setup)
REQUIRED_KEYS = [
    ("DISCORD_KEY", "discord key"),
    ("ADD_SONG_CHANNEL_ID", "add song channel id"),
]


def _float_env(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    if value <= 0:
        _stderr_print(f"{name} must be positive, falling back to {default}")
        return default
    return value


@dataclass(frozen=True)
class AppConfig:
    """Typed configuration, read once at startup."""

    discord_key: str = ""
    add_song_channel_id: str = ""
    endpoint_address: str = DEFAULT_ENDPOINT_ADDRESS
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    command_prefix: str = DEFAULT_COMMAND_PREFIX
    call_timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            discord_key=os.getenv("DISCORD_KEY", "").strip(),
            add_song_channel_id=os.getenv("ADD_SONG_CHANNEL_ID", "").strip(),
            endpoint_address=os.getenv("ITG_ENDPOINT_ADDRESS", "").strip()
            or DEFAULT_ENDPOINT_ADDRESS,
            connect_timeout=_float_env("ITG_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
            command_prefix=os.getenv("COMMAND_PREFIX", "").strip() or DEFAULT_COMMAND_PREFIX,
            call_timeout=_float_env("ITG_CALL_TIMEOUT", None),
        )

    def missing(self) -> List[str]:
        """Names of required environment variables that are unset."""
        values = {
            "DISCORD_KEY": self.discord_key,
            "ADD_SONG_CHANNEL_ID": self.add_song_channel_id,
        }
        return [key for key, _ in REQUIRED_KEYS if not values[key]]

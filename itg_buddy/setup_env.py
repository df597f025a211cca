"""Interactive .env setup — prompt for missing keys on first run."""

import os
from typing import Callable, List, Optional, Set

from dotenv import dotenv_values, load_dotenv

from itg_buddy.config import ENV_FILE, REQUIRED_KEYS


def _read_existing_keys(env_path: str) -> Set[str]:
    """Keys with a non-empty value in `env_path` (missing file → empty set)."""
    if not os.path.exists(env_path):
        return set()
    return {key for key, value in dotenv_values(env_path).items() if value and value.strip()}


def check_and_prompt_env(
    env_path: str = ENV_FILE,
    prompt: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """Prompt for every required key missing from `env_path` and append the answers.

    Returns the names of the keys that were written.
    """
    ask = prompt or input
    defined = _read_existing_keys(env_path)
    new_entries: list[str] = []
    written: list[str] = []

    for key, label in REQUIRED_KEYS:
        if key in defined:
            continue
        try:
            value = ask(f"Input your {label}: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if value:
            new_entries.append(f"{key}={value}")
            written.append(key)

    if new_entries:
        with open(env_path, "a") as f:
            f.write("\n".join([""] + new_entries + [""]))
        print(f"Saved config to {os.path.abspath(env_path)}")
    else:
        print("Nothing to save.")

    # Reload so os.environ reflects any new values
    load_dotenv(env_path, override=True)
    return written

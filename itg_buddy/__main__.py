"""Command-line entry point.

    itg-buddy          run the bot
    itg-buddy setup    prompt for missing configuration and save it to .env
"""

import asyncio
import sys

from itg_buddy.config import ENV_FILE, AppConfig


def main() -> int:
    if len(sys.argv) > 1 and sys.argv[1] == "setup":
        from itg_buddy.setup_env import check_and_prompt_env

        check_and_prompt_env(ENV_FILE)
        return 0

    from itg_buddy.adapters.discord.launcher import launch_bot

    try:
        return asyncio.run(launch_bot(AppConfig.from_env()))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())

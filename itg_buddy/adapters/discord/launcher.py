"""Launcher for the add-song Discord bot."""

import asyncio
import sys
from typing import Optional

from itg_buddy.adapters.discord.bot import ITGBuddyBot
from itg_buddy.config import AppConfig
from itg_buddy.domain.dispatch import SongDispatcher
from itg_buddy.domain.handler import AddSongHandler
from itg_buddy.ports.outbound import EndpointConnector


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_bot(config: AppConfig, connector: Optional[EndpointConnector] = None) -> ITGBuddyBot:
    """Wire config → dispatcher → handler → Discord client."""
    dispatcher = SongDispatcher(
        endpoint_address=config.endpoint_address,
        connect_timeout=config.connect_timeout,
        connector=connector,
        call_timeout=config.call_timeout,
    )
    handler = AddSongHandler(
        watched_channel_id=config.add_song_channel_id,
        dispatcher=dispatcher,
    )
    return ITGBuddyBot(handler, command_prefix=config.command_prefix)


async def launch_bot(config: AppConfig) -> int:
    """Run the bot until it disconnects. Returns a process exit code."""
    missing = config.missing()
    if missing:
        _log(f"Missing configuration: {', '.join(missing)}. Run `itg-buddy setup` first.")
        return 1

    bot = build_bot(config)
    _log(f"Launching {bot.bot_name}...")
    async with bot:
        await bot.start(config.discord_key)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(launch_bot(AppConfig.from_env())))

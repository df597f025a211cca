"""Discord adapter — bridges discord.Client to the add-song pipeline.

Handles:
- watched channel: every .zip attachment is sent to AddSong, one reply each
- prefix commands: !ping, !add-song <url>, !register (owner only)
- slash commands: /ping, /add-song
"""

import sys
from typing import Optional, Union

import discord
from discord import app_commands

from itg_buddy.adapters.discord.reply import InteractionReplyTarget, MessageReplyTarget
from itg_buddy.domain.handler import AddSongHandler
from itg_buddy.domain.models import Attachment, StatusMessage
from itg_buddy.ports.inbound import IncomingMessage

ADD_SONG_USAGE = "Usage: `{prefix}add-song <url>`"


def _log(msg: str):
    print(msg, file=sys.stderr)


def to_incoming(message: discord.Message) -> IncomingMessage:
    """Convert a Discord message to platform-agnostic IncomingMessage."""
    return IncomingMessage(
        channel_id=str(message.channel.id),
        content=message.content or "",
        author_name=str(message.author),
        attachments=[Attachment(filename=a.filename, url=a.url) for a in message.attachments],
    )


def pong_text(message: Optional[str] = None) -> str:
    return f"Pong! {message or ''}".rstrip()


class ITGBuddyBot(discord.Client):
    """Discord client for the add-song relay."""

    bot_name = "ITGBuddy"

    def __init__(self, handler: AddSongHandler, command_prefix: str = "!", **discord_kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)

        self.handler = handler
        self.dispatcher = handler.dispatcher
        self.reporter = handler.reporter
        self.command_prefix = command_prefix
        self.tree = app_commands.CommandTree(self)
        self._register_slash_commands()

    def _register_slash_commands(self):
        @self.tree.command(name="ping", description="Replies with Pong!")
        @app_commands.describe(message="Message to respond with")
        async def ping(interaction: discord.Interaction, message: Optional[str] = None):
            await self.reporter.report(
                InteractionReplyTarget(interaction),
                StatusMessage(text=pong_text(message), success=True),
            )

        @self.tree.command(name="add-song", description="Add a song pack from a URL")
        @app_commands.describe(url="Link to the song pack (.zip)")
        async def add_song(interaction: discord.Interaction, url: str):
            try:
                await interaction.response.defer(thinking=True)
            except discord.DiscordException as e:
                _log(f"[{self.bot_name}] could not defer /add-song: {e}")
            status = await self.dispatcher.run_command(url)
            await self.reporter.report(InteractionReplyTarget(interaction), status)

    async def on_ready(self):
        _log(f"[{self.bot_name}] logged in as {self.user}")
        _log(
            f"[{self.bot_name}] watching channel {self.handler.watched_channel_id}, "
            f"endpoint {self.dispatcher.endpoint_address}"
        )

    async def on_message(self, message: discord.Message):
        # Guard: self.user can be None before on_ready fires
        if not self.user or message.author == self.user:
            return

        if await self._handle_prefix_command(message):
            return

        await self.handler.handle(to_incoming(message), MessageReplyTarget(message))

    async def _handle_prefix_command(self, message: discord.Message) -> bool:
        """Run a prefix command if the message is one. Returns True when handled."""
        content = (message.content or "").strip()
        if not content.startswith(self.command_prefix):
            return False
        parts = content[len(self.command_prefix):].split(maxsplit=1)
        if not parts:
            return False
        cmd = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else ""
        target = MessageReplyTarget(message)

        if cmd == "ping":
            await self.reporter.report(target, StatusMessage(text=pong_text(arg), success=True))
            return True

        if cmd == "add-song":
            if not arg:
                usage = ADD_SONG_USAGE.format(prefix=self.command_prefix)
                await self.reporter.report(target, StatusMessage(text=usage, success=False))
                return True
            status = await self.dispatcher.run_command(arg)
            await self.reporter.report(target, status)
            return True

        if cmd == "register":
            await self._handle_register(message)
            return True

        return False

    async def _is_owner(self, user: Union[discord.User, discord.Member]) -> bool:
        try:
            info = await self.application_info()
        except discord.DiscordException as e:
            _log(f"[{self.bot_name}] application_info failed: {e}")
            return False
        if info.team:
            return user.id in {m.id for m in info.team.members}
        return info.owner.id == user.id

    async def _handle_register(self, message: discord.Message):
        """Sync slash commands with Discord (owner only)."""
        target = MessageReplyTarget(message)
        if not await self._is_owner(message.author):
            await self.reporter.report(
                target,
                StatusMessage(text="Only the bot owner can register commands.", success=False),
            )
            return

        try:
            synced = await self.tree.sync()
        except discord.DiscordException as e:
            _log(f"[{self.bot_name}] slash command sync failed: {e}")
            status = StatusMessage(text=f"Failed to register commands: {e}", success=False)
        else:
            _log(f"[{self.bot_name}] synced {len(synced)} slash command(s)")
            status = StatusMessage(
                text=f"Registered {len(synced)} slash command(s).", success=True
            )
        await self.reporter.report(target, status)

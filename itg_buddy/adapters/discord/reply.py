"""ReplyPort implementations backed by discord.py objects."""

import discord

from itg_buddy.domain.errors import DeliveryError

MAX_MESSAGE_LENGTH = 2000


def _clip(text: str) -> str:
    if len(text) <= MAX_MESSAGE_LENGTH:
        return text
    return text[: MAX_MESSAGE_LENGTH - 3] + "..."


class MessageReplyTarget:
    """Replies to the message that triggered the dispatch."""

    def __init__(self, message: discord.Message):
        self._message = message

    async def reply(self, text: str, *, failed: bool = False) -> None:
        try:
            await self._message.reply(_clip(text))
        except discord.DiscordException as e:
            raise DeliveryError(f"reply to message {self._message.id} failed: {e}") from e


class InteractionReplyTarget:
    """Replies to a slash-command interaction.

    Failed results are sent ephemeral so only the invoking user sees them.
    """

    def __init__(self, interaction: discord.Interaction):
        self._interaction = interaction

    async def reply(self, text: str, *, failed: bool = False) -> None:
        text = _clip(text)
        try:
            if self._interaction.response.is_done():
                await self._interaction.followup.send(text, ephemeral=failed)
            else:
                await self._interaction.response.send_message(text, ephemeral=failed)
        except discord.DiscordException as e:
            raise DeliveryError(
                f"reply to interaction {self._interaction.id} failed: {e}"
            ) from e

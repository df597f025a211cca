"""Discord adapters — client, reply targets and launcher."""

from itg_buddy.adapters.discord.bot import ITGBuddyBot, to_incoming
from itg_buddy.adapters.discord.reply import InteractionReplyTarget, MessageReplyTarget

__all__ = [
    "ITGBuddyBot",
    "InteractionReplyTarget",
    "MessageReplyTarget",
    "to_incoming",
]

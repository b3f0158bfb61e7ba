"""Chat markup dialects used to turn icon ids and ids into display text."""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from typing import Optional, Union

from telegram.constants import ParseMode
from telegram.helpers import mention_html

__all__ = [
    "BLACK_JOKER_EMOJI",
    "ChatMarkup",
    "DiscordMarkup",
    "FAST_FORWARD_EMOJI",
    "HANDSHAKE_EMOJI",
    "TelegramMarkup",
    "X_EMOJI",
    "get_markup",
]

ChatId = Union[int, str]

HANDSHAKE_EMOJI = "\U0001F91D"
FAST_FORWARD_EMOJI = "\u23E9"
X_EMOJI = "\u274C"
BLACK_JOKER_EMOJI = "\U0001F0CF"

# Discord shortcode name -> unicode glyph
SHORTCODES = {
    "handshake": HANDSHAKE_EMOJI,
    "fast_forward": FAST_FORWARD_EMOJI,
    "x": X_EMOJI,
    "black_joker": BLACK_JOKER_EMOJI,
}


class ChatMarkup(ABC):
    """Formatting primitives shared by the supported chat platforms."""

    name: str = ""
    parse_mode: Optional[str] = None

    @abstractmethod
    def emoji(self, icon_id) -> str:
        """Render a custom emoji identifier as inline display text."""

    @abstractmethod
    def user(self, user_id: ChatId, name: Optional[str] = None) -> str:
        pass

    @abstractmethod
    def channel(self, channel_id: ChatId) -> str:
        pass

    @abstractmethod
    def bold(self, text: str) -> str:
        pass

    @abstractmethod
    def code(self, text) -> str:
        pass

    @abstractmethod
    def code_block(self, text: str) -> str:
        pass

    @abstractmethod
    def link(self, url: str) -> str:
        pass

    def shortcode(self, name: str) -> str:
        """Render a named emoji such as ``"handshake"``."""
        try:
            return SHORTCODES[name]
        except KeyError:
            raise ValueError(f"Unknown emoji shortcode: {name!r}") from None

    def escape(self, text) -> str:
        return str(text)


class DiscordMarkup(ChatMarkup):
    """Discord message markdown and mention syntax."""

    name = "discord"
    emoji_name = "card"

    def emoji(self, icon_id) -> str:
        return f"<:{self.emoji_name}:{icon_id}>"

    def user(self, user_id: ChatId, name: Optional[str] = None) -> str:
        return f"<@{user_id}>"

    def channel(self, channel_id: ChatId) -> str:
        return f"<#{channel_id}>"

    def bold(self, text: str) -> str:
        return f"**{text}**"

    def code(self, text) -> str:
        return f"`{text}`"

    def code_block(self, text: str) -> str:
        return f"```\n{text}\n```"

    def link(self, url: str) -> str:
        # Angle brackets suppress the link preview embed.
        return f"<{url}>"

    def shortcode(self, name: str) -> str:
        if name not in SHORTCODES:
            raise ValueError(f"Unknown emoji shortcode: {name!r}")
        return f":{name}:"


class TelegramMarkup(ChatMarkup):
    """Telegram HTML parse mode.

    Custom emoji need a fallback character that clients without the emoji
    pack display instead.
    """

    name = "telegram"
    parse_mode = ParseMode.HTML
    emoji_fallback = BLACK_JOKER_EMOJI

    def escape(self, text) -> str:
        return html.escape(str(text), quote=False)

    def emoji(self, icon_id) -> str:
        return f'<tg-emoji emoji-id="{icon_id}">{self.emoji_fallback}</tg-emoji>'

    def user(self, user_id: ChatId, name: Optional[str] = None) -> str:
        return mention_html(user_id, name if name else str(user_id))

    def channel(self, channel_id: ChatId) -> str:
        # Supergroup ids carry a "-100" prefix that t.me/c links omit.
        text = str(channel_id)
        if text.startswith("-100"):
            text = text[4:]
        return f'<a href="https://t.me/c/{text}">#{text}</a>'

    def bold(self, text: str) -> str:
        return f"<b>{self.escape(text)}</b>"

    def code(self, text) -> str:
        return f"<code>{self.escape(text)}</code>"

    def code_block(self, text: str) -> str:
        return f"<pre>{self.escape(text)}</pre>"

    def link(self, url: str) -> str:
        return self.escape(url)


_MARKUPS = {
    DiscordMarkup.name: DiscordMarkup,
    TelegramMarkup.name: TelegramMarkup,
}


def get_markup(platform: str) -> ChatMarkup:
    """Return the markup dialect registered for ``platform``."""

    key = (platform or "").strip().lower()
    if key not in _MARKUPS:
        raise ValueError(
            f"Unsupported chat platform: {platform!r} "
            f"(expected one of: {', '.join(sorted(_MARKUPS))})"
        )
    return _MARKUPS[key]()

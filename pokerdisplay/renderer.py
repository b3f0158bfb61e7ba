"""Two-row card strip rendering.

Each card is shown as two stacked emoji: the upper half is keyed by rank
and suit, the lower half by suit only. A row can be padded with face-down
cards and split with a wider gap, e.g. between best hand and hole cards.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from pokerdisplay.cards import Slot, pad_slots
from pokerdisplay.icons import (
    LOWER_HALVES,
    UPPER_HALVES,
    IconId,
    LowerIconTable,
    MissingIconError,
    UpperIconTable,
)
from pokerdisplay.markup import DiscordMarkup

if TYPE_CHECKING:
    from pokerdisplay.config import Config

logger = logging.getLogger(__name__)

__all__ = ["CardGridRenderer", "DEFAULT_GAP", "cards_to_str", "default_renderer"]

DEFAULT_GAP = "   "


class CardGridRenderer:
    """Render slot sequences as an upper and a lower row of icons."""

    def __init__(
        self,
        upper: UpperIconTable = UPPER_HALVES,
        lower: LowerIconTable = LOWER_HALVES,
        mention: Optional[Callable[[IconId], str]] = None,
        gap: str = DEFAULT_GAP,
    ) -> None:
        self._upper = upper
        self._lower = lower
        self._mention = mention if mention is not None else DiscordMarkup().emoji
        self._gap = gap

    @classmethod
    def from_config(cls, cfg: "Config") -> "CardGridRenderer":
        upper, lower = cfg.icon_tables()
        return cls(
            upper=upper,
            lower=lower,
            mention=cfg.markup().emoji,
            gap=" " * cfg.GAP_WIDTH,
        )

    @property
    def gap(self) -> str:
        return self._gap

    def _join(self, tokens: List[str], split_index: Optional[int]) -> str:
        if split_index is None or not 0 < split_index < len(tokens):
            return " ".join(tokens)
        return (
            " ".join(tokens[:split_index])
            + self._gap
            + " ".join(tokens[split_index:])
        )

    def _row(self, table, slots: Sequence[Slot], split_index: Optional[int]) -> str:
        try:
            icons = [table.lookup(slot) for slot in slots]
        except MissingIconError as exc:
            logger.error("Cannot render cards %s: %s", [str(s) for s in slots], exc)
            raise
        return self._join([self._mention(icon) for icon in icons], split_index)

    def render(
        self,
        slots: Sequence[Slot],
        split_index: Optional[int] = None,
        min_slots: int = 0,
    ) -> str:
        """Render ``slots`` as two lines of icons.

        Args:
            slots: Cards or face-down markers, left to right.
            split_index: Position in the padded row before which a gap is
                inserted. Values outside ``(0, len)`` render without a gap.
            min_slots: Pad the row with face-down cards up to this length.

        Raises:
            MissingIconError: if a card has no icon in one of the tables.
        """

        padded = pad_slots(slots, min_slots)
        upper = self._row(self._upper, padded, split_index)
        lower = self._row(self._lower, padded, split_index)
        return f"{upper}\n{lower}"

    __call__ = render


default_renderer = CardGridRenderer()


def cards_to_str(
    slots: Sequence[Slot],
    split_index: Optional[int] = None,
    min_slots: int = 0,
) -> str:
    """Render ``slots`` with the default Discord emoji tables."""

    return default_renderer.render(slots, split_index, min_slots)

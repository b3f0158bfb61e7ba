"""Icon tables mapping card halves to chat emoji identifiers.

The default identifiers reference the custom emotes of the Playing Card
Emojis Discord server. Every card is drawn as two stacked emotes: the upper
half carries rank and suit colour, the lower half carries the suit.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple, Union

from pokerdisplay.cards import Rank, Slot, Suit, is_face_down

logger = logging.getLogger(__name__)

IconId = Union[int, str]
UpperKey = Tuple[Suit, Rank]

__all__ = [
    "IconId",
    "IconTableError",
    "LowerIconTable",
    "LOWER_HALVES",
    "MissingIconError",
    "PokerDisplayError",
    "UpperIconTable",
    "UPPER_HALVES",
    "load_icon_tables",
    "with_suit",
]


class PokerDisplayError(Exception):
    """Base class for errors raised by this package."""


class IconTableError(PokerDisplayError, ValueError):
    """An icon table is malformed or incomplete."""


class MissingIconError(PokerDisplayError, LookupError):
    """A slot has no entry in the icon table used to render it."""

    def __init__(self, table: str, key: Any) -> None:
        self.table = table
        self.key = key
        super().__init__(f"missing icon mapping in {table} table for {key!r}")


class UpperIconTable:
    """Read-only ``(suit, rank) -> icon`` mapping plus a face-down icon."""

    name = "upper"

    def __init__(self, entries: Mapping[UpperKey, IconId], face_down: IconId) -> None:
        self._entries = MappingProxyType(dict(entries))
        self.face_down = face_down

    @property
    def entries(self) -> Mapping[UpperKey, IconId]:
        return self._entries

    def lookup(self, slot: Slot) -> IconId:
        if is_face_down(slot):
            return self.face_down
        key = (slot.suit, slot.rank)
        try:
            return self._entries[key]
        except KeyError:
            raise MissingIconError(self.name, key) from None

    def missing_keys(self) -> List[UpperKey]:
        return [
            (suit, rank)
            for suit in Suit
            for rank in Rank
            if (suit, rank) not in self._entries
        ]

    def validate(self) -> None:
        missing = self.missing_keys()
        if missing:
            raise IconTableError(
                f"{self.name} icon table is missing {len(missing)} entries: "
                + ", ".join(f"{suit.value}/{rank.value}" for suit, rank in missing)
            )

    def __len__(self) -> int:
        return len(self._entries) + 1


class LowerIconTable:
    """Read-only ``suit -> icon`` mapping plus a face-down icon."""

    name = "lower"

    def __init__(self, entries: Mapping[Suit, IconId], face_down: IconId) -> None:
        self._entries = MappingProxyType(dict(entries))
        self.face_down = face_down

    @property
    def entries(self) -> Mapping[Suit, IconId]:
        return self._entries

    def lookup(self, slot: Slot) -> IconId:
        if is_face_down(slot):
            return self.face_down
        try:
            return self._entries[slot.suit]
        except KeyError:
            raise MissingIconError(self.name, slot.suit) from None

    def missing_keys(self) -> List[Suit]:
        return [suit for suit in Suit if suit not in self._entries]

    def validate(self) -> None:
        missing = self.missing_keys()
        if missing:
            raise IconTableError(
                f"{self.name} icon table is missing entries: "
                + ", ".join(suit.value for suit in missing)
            )

    def __len__(self) -> int:
        return len(self._entries) + 1


def with_suit(rank_ids: Mapping[Rank, IconId], suit: Suit) -> Dict[UpperKey, IconId]:
    """Key a ``rank -> icon`` mapping by ``(suit, rank)``."""

    return {(suit, rank): icon_id for rank, icon_id in rank_ids.items()}


# ---------------------------------------------------------------------------
# Default emote identifiers
# ---------------------------------------------------------------------------

_BLACK_RANKS = {
    Rank.ACE: 1024477002092253215,
    Rank.TWO: 1024476992676048938,
    Rank.THREE: 1024476993825296404,
    Rank.FOUR: 1024476994374750289,
    Rank.FIVE: 1024476995578499143,
    Rank.SIX: 1024476996677410887,
    Rank.SEVEN: 1024476997558226964,
    Rank.EIGHT: 1024476998820696074,
    Rank.NINE: 1024477000200634428,
    Rank.TEN: 1024477001186299946,
    Rank.JACK: 1024477003098882058,
    Rank.QUEEN: 1024477006882160750,
    Rank.KING: 1024477004206198804,
}

_RED_RANKS = {
    Rank.ACE: 1024477020836614264,
    Rank.TWO: 1024477011537825862,
    Rank.THREE: 1024477012091473922,
    Rank.FOUR: 1024477013458821130,
    Rank.FIVE: 1024477014293483580,
    Rank.SIX: 1024477014985556079,
    Rank.SEVEN: 1024477016600354856,
    Rank.EIGHT: 1024477017732812860,
    Rank.NINE: 1024477018856890418,
    Rank.TEN: 1024477019771248740,
    Rank.JACK: 1024477021662892103,
    Rank.QUEEN: 1024477024489848883,
    Rank.KING: 1024477023177019443,
}

UPPER_HALVES = UpperIconTable(
    {
        key: icon_id
        for suit in Suit
        for key, icon_id in with_suit(
            _RED_RANKS if suit.is_red else _BLACK_RANKS, suit
        ).items()
    },
    face_down=1024477006122991686,
)

LOWER_HALVES = LowerIconTable(
    {
        Suit.CLUBS: 1024477007733588008,
        Suit.SPADES: 1024477010623467571,
        Suit.HEARTS: 1024477009637806171,
        Suit.DIAMONDS: 1024477008769597561,
    },
    face_down=1024477005107970110,
)


# ---------------------------------------------------------------------------
# JSON loading
# ---------------------------------------------------------------------------

def _enum_member(enum_cls, name: str, path: str):
    try:
        return enum_cls(name.strip().lower())
    except (AttributeError, ValueError):
        raise IconTableError(
            f"unknown {enum_cls.__name__.lower()} {name!r} at {path}"
        ) from None


def _icon_id(value: Any, path: str) -> IconId:
    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise IconTableError(f"icon id at {path} must be an integer, got {value!r}")


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise IconTableError(f"{path} must be a JSON object")
    return value


def _parse_upper(data: Mapping[str, Any]) -> UpperIconTable:
    entries: Dict[UpperKey, IconId] = {}
    face_down = None
    for suit_name, ranks in data.items():
        if suit_name == "face_down":
            face_down = _icon_id(ranks, "upper.face_down")
            continue
        suit = _enum_member(Suit, suit_name, f"upper.{suit_name}")
        for rank_name, value in _require_mapping(ranks, f"upper.{suit_name}").items():
            path = f"upper.{suit_name}.{rank_name}"
            entries[(suit, _enum_member(Rank, rank_name, path))] = _icon_id(value, path)
    if face_down is None:
        raise IconTableError("upper.face_down is required")
    return UpperIconTable(entries, face_down)


def _parse_lower(data: Mapping[str, Any]) -> LowerIconTable:
    entries: Dict[Suit, IconId] = {}
    face_down = None
    for suit_name, value in data.items():
        path = f"lower.{suit_name}"
        if suit_name == "face_down":
            face_down = _icon_id(value, path)
            continue
        entries[_enum_member(Suit, suit_name, path)] = _icon_id(value, path)
    if face_down is None:
        raise IconTableError("lower.face_down is required")
    return LowerIconTable(entries, face_down)


def load_icon_tables(path: Union[str, Path]) -> Tuple[UpperIconTable, LowerIconTable]:
    """Load and validate icon tables from a JSON file.

    Expected layout::

        {
          "upper": {"spades": {"ace": 1, ...}, ..., "face_down": 0},
          "lower": {"spades": 2, ..., "face_down": 3}
        }

    Raises:
        IconTableError: if the document is malformed or either table is
            incomplete.
    """

    source = Path(path)
    try:
        document = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise IconTableError(f"cannot read icon table JSON from {source}: {exc}") from exc

    document = _require_mapping(document, "document")
    upper = _parse_upper(_require_mapping(document.get("upper"), "upper"))
    lower = _parse_lower(_require_mapping(document.get("lower"), "lower"))
    upper.validate()
    lower.validate()

    logger.info(
        "Loaded icon tables from %s (%d upper, %d lower entries)",
        source,
        len(upper),
        len(lower),
    )
    return upper, lower

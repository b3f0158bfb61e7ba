#!/usr/bin/env python3

import enum
import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union


class Rank(enum.Enum):
    ACE = "ace"
    TWO = "two"
    THREE = "three"
    FOUR = "four"
    FIVE = "five"
    SIX = "six"
    SEVEN = "seven"
    EIGHT = "eight"
    NINE = "nine"
    TEN = "ten"
    JACK = "jack"
    QUEEN = "queen"
    KING = "king"

    @property
    def symbol(self) -> str:
        """Return the short rank text ("A", "10", "K", ...)."""
        return _RANK_SYMBOLS[self]


class Suit(enum.Enum):
    CLUBS = "clubs"
    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"

    @property
    def symbol(self) -> str:
        """Return the unicode suit glyph (♣, ♠, ♥, ♦)."""
        return _SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


_RANK_SYMBOLS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
}

# Accepted rank tokens, upper-cased.
_TEXT_TO_RANK = {symbol: rank for rank, symbol in _RANK_SYMBOLS.items()}
_TEXT_TO_RANK["T"] = Rank.TEN

_TEXT_TO_SUIT = {
    "♣": Suit.CLUBS,
    "♠": Suit.SPADES,
    "♥": Suit.HEARTS,
    "♦": Suit.DIAMONDS,
    "♧": Suit.CLUBS,
    "♤": Suit.SPADES,
    "♡": Suit.HEARTS,
    "♢": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "S": Suit.SPADES,
    "H": Suit.HEARTS,
    "D": Suit.DIAMONDS,
}

_VARIATION_SELECTOR = "\ufe0f"

_FACE_DOWN_TOKENS = {"?", "??", "XX"}


@dataclass(frozen=True)
class Card:
    """A concrete playing card.

    Parsing accepts both the unicode notation shown to players
    (``"A♠"``, ``"10♥"``) and the short letter notation used by engines
    (``"As"``, ``"Th"``).
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    @classmethod
    def parse(cls, text: str) -> "Card":
        """Create a card from ``"A♠"``/``"As"`` style text."""

        token = text.strip().replace(_VARIATION_SELECTOR, "").upper()
        if len(token) < 2:
            raise ValueError(f"Invalid card text: {text!r}")

        rank_text, suit_text = token[:-1], token[-1]
        if suit_text not in _TEXT_TO_SUIT:
            raise ValueError(f"Unsupported suit symbol: {suit_text!r}")
        if rank_text not in _TEXT_TO_RANK:
            raise ValueError(f"Unsupported rank text: {rank_text!r}")

        return cls(_TEXT_TO_RANK[rank_text], _TEXT_TO_SUIT[suit_text])


class FaceDown:
    """Marker for a card that is not visible or has not been dealt yet."""

    _instance = None

    def __new__(cls) -> "FaceDown":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FACE_DOWN"

    def __str__(self) -> str:
        return "??"

    def __reduce__(self):
        return (FaceDown, ())


FACE_DOWN = FaceDown()

Slot = Union[Card, FaceDown]
Slots = List[Slot]


def is_face_down(slot: Slot) -> bool:
    return slot is FACE_DOWN


def parse_slot(text: str) -> Slot:
    """Parse a single card, treating ``"??"`` and ``"XX"`` as face-down."""

    if text.strip().upper() in _FACE_DOWN_TOKENS:
        return FACE_DOWN
    return Card.parse(text)


def parse_slots(text: str) -> Slots:
    """Parse a whitespace or comma separated list of cards."""

    return [parse_slot(token) for token in re.split(r"[\s,]+", text) if token]


def pad_slots(slots: Iterable[Slot], min_slots: int = 0) -> Slots:
    """Return ``slots`` as a list, padded at the end with face-down slots."""

    padded = list(slots)
    missing = min_slots - len(padded)
    if missing > 0:
        padded.extend([FACE_DOWN] * missing)
    return padded


def full_deck() -> Sequence[Card]:
    """All 52 cards, grouped by suit."""

    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)

#!/usr/bin/env python3
"""
Conversion between PokerKit's card model and display slots.

Game engines built on ``pokerkit`` hand out :class:`pokerkit.utilities.Card`
objects. Cards whose rank or suit is unknown (``"?"``) are hidden from the
viewer and are displayed face-down.
"""

from __future__ import annotations

from typing import Iterable, List

from pokerkit.utilities import Card as PKCard
from pokerkit.utilities import Rank as PKRank
from pokerkit.utilities import Suit as PKSuit

from pokerdisplay.cards import FACE_DOWN, Card, Rank, Slot, Suit, is_face_down


# ---------------------------------------------------------------------------
# Suit and rank conversion tables
# ---------------------------------------------------------------------------

_POKERKIT_SUIT_TO_SUIT = {
    "c": Suit.CLUBS,
    "d": Suit.DIAMONDS,
    "h": Suit.HEARTS,
    "s": Suit.SPADES,
}

_SUIT_TO_POKERKIT_SUIT = {suit: code for code, suit in _POKERKIT_SUIT_TO_SUIT.items()}

_POKERKIT_RANK_TO_RANK = {
    "A": Rank.ACE,
    "K": Rank.KING,
    "Q": Rank.QUEEN,
    "J": Rank.JACK,
    "T": Rank.TEN,
    "9": Rank.NINE,
    "8": Rank.EIGHT,
    "7": Rank.SEVEN,
    "6": Rank.SIX,
    "5": Rank.FIVE,
    "4": Rank.FOUR,
    "3": Rank.THREE,
    "2": Rank.TWO,
}

_RANK_TO_POKERKIT_RANK = {rank: code for code, rank in _POKERKIT_RANK_TO_RANK.items()}

_UNKNOWN_TOKEN = "?"


# ---------------------------------------------------------------------------
# Conversion helpers
# ---------------------------------------------------------------------------

def slot_from_pokerkit(card: PKCard) -> Slot:
    """Convert a PokerKit card, mapping unknown cards to face-down."""

    rank_token = card.rank.value
    suit_token = card.suit.value

    if rank_token == _UNKNOWN_TOKEN or suit_token == _UNKNOWN_TOKEN:
        return FACE_DOWN

    if rank_token not in _POKERKIT_RANK_TO_RANK:
        raise ValueError(f"Unsupported PokerKit rank token: {rank_token!r}")

    if suit_token not in _POKERKIT_SUIT_TO_SUIT:
        raise ValueError(f"Unsupported PokerKit suit token: {suit_token!r}")

    return Card(_POKERKIT_RANK_TO_RANK[rank_token], _POKERKIT_SUIT_TO_SUIT[suit_token])


def slots_from_pokerkit(cards: Iterable[PKCard]) -> List[Slot]:
    return [slot_from_pokerkit(card) for card in cards]


def parse_pokerkit(raw: str) -> List[Slot]:
    """Parse PokerKit's compact notation (e.g. ``"AsTh"``) into slots."""

    return slots_from_pokerkit(PKCard.parse(raw))


def slot_to_pokerkit(slot: Slot) -> PKCard:
    """Convert a concrete card into a PokerKit :class:`Card`."""

    if is_face_down(slot):
        raise ValueError("A face-down slot has no PokerKit equivalent")

    return PKCard(
        PKRank(_RANK_TO_POKERKIT_RANK[slot.rank]),
        PKSuit(_SUIT_TO_POKERKIT_SUIT[slot.suit]),
    )

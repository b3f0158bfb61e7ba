from types import SimpleNamespace

import pytest
from pokerkit.utilities import Card as PKCard

from pokerdisplay.cards import FACE_DOWN, Card, Rank, Suit, full_deck
from pokerdisplay.pokerkit_adapter import (
    parse_pokerkit,
    slot_from_pokerkit,
    slot_to_pokerkit,
    slots_from_pokerkit,
)


def _fake_card(rank: str, suit: str) -> SimpleNamespace:
    """Stand-in exposing the ``rank.value``/``suit.value`` pair PokerKit uses."""

    return SimpleNamespace(
        rank=SimpleNamespace(value=rank),
        suit=SimpleNamespace(value=suit),
    )


def test_parse_pokerkit_compact_notation():
    assert parse_pokerkit("AsTh2c") == [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TEN, Suit.HEARTS),
        Card(Rank.TWO, Suit.CLUBS),
    ]


def test_round_trip_whole_deck():
    deck = list(full_deck())

    assert slots_from_pokerkit(slot_to_pokerkit(card) for card in deck) == deck


def test_slot_to_pokerkit_matches_parsed_card():
    expected = next(iter(PKCard.parse("Kd")))

    assert slot_to_pokerkit(Card(Rank.KING, Suit.DIAMONDS)) == expected


@pytest.mark.parametrize("rank, suit", [("?", "?"), ("A", "?"), ("?", "s")])
def test_unknown_cards_are_face_down(rank, suit):
    assert slot_from_pokerkit(_fake_card(rank, suit)) is FACE_DOWN


@pytest.mark.parametrize("rank, suit", [("1", "s"), ("A", "x")])
def test_unsupported_tokens_rejected(rank, suit):
    with pytest.raises(ValueError):
        slot_from_pokerkit(_fake_card(rank, suit))


def test_face_down_has_no_pokerkit_equivalent():
    with pytest.raises(ValueError):
        slot_to_pokerkit(FACE_DOWN)

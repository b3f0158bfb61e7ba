import pickle

import pytest

from pokerdisplay.cards import (
    FACE_DOWN,
    Card,
    FaceDown,
    Rank,
    Suit,
    full_deck,
    is_face_down,
    pad_slots,
    parse_slot,
    parse_slots,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A♠", Card(Rank.ACE, Suit.SPADES)),
        ("10♥", Card(Rank.TEN, Suit.HEARTS)),
        ("Q♦️", Card(Rank.QUEEN, Suit.DIAMONDS)),
        ("As", Card(Rank.ACE, Suit.SPADES)),
        ("Th", Card(Rank.TEN, Suit.HEARTS)),
        ("10c", Card(Rank.TEN, Suit.CLUBS)),
        ("qd", Card(Rank.QUEEN, Suit.DIAMONDS)),
        (" 7♧ ", Card(Rank.SEVEN, Suit.CLUBS)),
    ],
)
def test_card_parse(text, expected):
    assert Card.parse(text) == expected


@pytest.mark.parametrize("text", ["", "A", "1♠", "Ax", "11h", "AA"])
def test_card_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Card.parse(text)


def test_cards_are_equal_by_value_and_hashable():
    first = Card(Rank.JACK, Suit.CLUBS)
    second = Card.parse("J♣")

    assert first == second
    assert len({first, second}) == 1
    assert first != Card(Rank.JACK, Suit.SPADES)


def test_card_is_immutable():
    card = Card(Rank.TWO, Suit.HEARTS)

    with pytest.raises(AttributeError):
        card.rank = Rank.THREE


def test_card_str_uses_unicode_notation():
    assert str(Card(Rank.TEN, Suit.DIAMONDS)) == "10♦"
    assert str(Card(Rank.ACE, Suit.CLUBS)) == "A♣"


def test_face_down_is_a_singleton():
    assert FaceDown() is FACE_DOWN
    assert pickle.loads(pickle.dumps(FACE_DOWN)) is FACE_DOWN
    assert is_face_down(FACE_DOWN)
    assert not is_face_down(Card(Rank.ACE, Suit.SPADES))


@pytest.mark.parametrize("text", ["??", "?", "xx", " XX "])
def test_parse_slot_face_down_tokens(text):
    assert parse_slot(text) is FACE_DOWN


def test_parse_slots_splits_on_whitespace_and_commas():
    slots = parse_slots("A♠, Kh  ??,10d")

    assert slots == [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.HEARTS),
        FACE_DOWN,
        Card(Rank.TEN, Suit.DIAMONDS),
    ]


def test_pad_slots_appends_face_down_cards():
    ace = Card(Rank.ACE, Suit.SPADES)

    assert pad_slots([ace], 3) == [ace, FACE_DOWN, FACE_DOWN]
    assert pad_slots([ace], 1) == [ace]
    assert pad_slots([ace], 0) == [ace]
    assert pad_slots((), 2) == [FACE_DOWN, FACE_DOWN]


def test_full_deck_has_52_unique_cards():
    deck = full_deck()

    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_suit_colour():
    assert Suit.HEARTS.is_red
    assert Suit.DIAMONDS.is_red
    assert not Suit.SPADES.is_red
    assert not Suit.CLUBS.is_red

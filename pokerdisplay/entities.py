#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import List, Sequence, Union

from pokerdisplay.cards import Card, Slot


UserId = Union[int, str]
ChannelId = Union[int, str]
Money = int


@dataclass(frozen=True)
class Pot:
    name: str
    money: Money


@dataclass(frozen=True)
class Move:
    """A move the current player may make and what it costs them."""

    action: str
    cost: Money


@dataclass(frozen=True)
class PotWin:
    """Outcome of a pot at showdown. More than one winner splits the prize."""

    name: str
    prize: Money
    winners: Sequence[UserId]

    def __post_init__(self) -> None:
        if not self.winners:
            raise ValueError(f"Pot {self.name!r} has no winners")

    @property
    def is_split(self) -> bool:
        return len(self.winners) > 1


@dataclass
class ShowdownHand:
    """A revealed hand: the best five cards plus the player's hole cards."""

    player_id: UserId
    name: str
    cards: List[Card] = field(default_factory=list)
    hole_cards: List[Slot] = field(default_factory=list)

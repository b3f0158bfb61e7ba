"""Chat messages describing the state of a poker game.

The builders only format values computed by the game engine (pots, legal
moves, raise bounds). Card rows come from :class:`CardGridRenderer`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping, Optional, Sequence

from pokerdisplay.cards import Slot
from pokerdisplay.entities import ChannelId, Money, Move, Pot, PotWin, ShowdownHand, UserId
from pokerdisplay.markup import ChatMarkup, DiscordMarkup
from pokerdisplay.renderer import CardGridRenderer, default_renderer

if TYPE_CHECKING:
    from pokerdisplay.config import Config

HOLDEM_RULES_URL = "https://en.wikipedia.org/wiki/Texas_hold_%27em"
BOT_PAGE_URL = "https://top.gg/bot/461791942779338762"

COMMUNITY_SLOTS = 5
BEST_HAND_SIZE = 5


class MessageBuilder:
    def __init__(
        self,
        markup: Optional[ChatMarkup] = None,
        renderer: Optional[CardGridRenderer] = None,
        community_slots: int = COMMUNITY_SLOTS,
    ) -> None:
        self._markup = markup if markup is not None else DiscordMarkup()
        self._renderer = renderer if renderer is not None else default_renderer
        self._community_slots = community_slots

    @classmethod
    def from_config(cls, cfg: "Config") -> "MessageBuilder":
        return cls(
            markup=cfg.markup(),
            renderer=CardGridRenderer.from_config(cfg),
            community_slots=cfg.COMMUNITY_SLOTS,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _chips(self, amount: Money) -> str:
        return f"{self._markup.code(amount)} chips"

    def _mentions(self, user_ids: Iterable[UserId]) -> str:
        return ", ".join(self._markup.user(user_id) for user_id in user_ids)

    def _pots(self, pots: Sequence[Pot]) -> str:
        m = self._markup
        return "\n".join(
            f"{m.bold(pot.name + ':')} {self._chips(pot.money)}" for pot in pots
        )

    def _move(self, move: Move) -> str:
        action = move.action.replace("_", " ").capitalize()
        return f"{self._markup.escape(action)} - {self._chips(move.cost)}"

    def _hand(self, hand: ShowdownHand) -> str:
        m = self._markup
        cards = self._renderer.render(
            list(hand.cards) + list(hand.hole_cards), BEST_HAND_SIZE
        )
        return f"{m.user(hand.player_id)} - {m.escape(hand.name)}\n{cards}"

    def _pot_win(self, win: PotWin) -> str:
        m = self._markup
        name = m.escape(win.name)
        if win.is_split:
            return (
                f"{self._mentions(win.winners)} split the {name} "
                f"for {self._chips(win.prize)} each!"
            )
        return f"{m.user(win.winners[0])} wins the {name} and gets {self._chips(win.prize)}!"

    def _budgets(self, budgets: Mapping[UserId, Money]) -> str:
        return "\n".join(
            f"{self._markup.user(user_id)} - {self._chips(budget)}"
            for user_id, budget in budgets.items()
        )

    def _host(self, player_id: UserId) -> str:
        m = self._markup
        return (
            f"{m.user(player_id)} is the host of the game and can "
            f"{m.shortcode('x')} abort it or {m.shortcode('fast_forward')} "
            "start it immediately."
        )

    # ------------------------------------------------------------------
    # Game progress
    # ------------------------------------------------------------------
    def game_state_message(self, community_cards: Sequence[Slot], pots: Sequence[Pot]) -> str:
        cards = self._renderer.render(community_cards, None, self._community_slots)
        return (
            f"{self._markup.bold('Community Cards:')}\n"
            f"{cards}\n"
            f"{self._pots(pots)}"
        )

    def turn_message(self, player_id: UserId, budget: Money, moves: Sequence[Move]) -> str:
        lines = [
            f"It's your turn, {self._markup.user(player_id)}!",
            f"What would you like to do? You still have {self._chips(budget)}.",
        ]
        lines.extend(self._move(move) for move in moves)
        return "\n".join(lines)

    def blinds_message(
        self,
        small_blind_id: UserId,
        small_blind_value: Money,
        big_blind_id: UserId,
        big_blind_value: Money,
    ) -> str:
        m = self._markup
        return (
            f"{m.user(small_blind_id)} places the small blind of "
            f"{self._chips(small_blind_value)}.\n"
            f"{m.user(big_blind_id)} places the big blind of "
            f"{self._chips(big_blind_value)}."
        )

    def invalid_raise_message(self, minimum: Money, maximum: Money) -> str:
        m = self._markup
        return (
            f"You must raise to an amount between {m.code(minimum)} and "
            f"{self._chips(maximum)}. E.g.: {m.code(f'raise {minimum}')}"
        )

    def timed_out_message(self, player_id: UserId) -> str:
        return (
            f"{self._markup.user(player_id)} did not respond in time "
            "and therefore folds automatically."
        )

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def instant_win_message(self, winner_id: UserId, money: Money) -> str:
        return (
            f"Everybody except {self._markup.user(winner_id)} has folded!\n"
            f"They win the main pot of {self._chips(money)}."
        )

    def showdown_message(
        self,
        hands: Sequence[ShowdownHand],
        pot_wins: Sequence[PotWin],
    ) -> str:
        hands_text = "\n".join(self._hand(hand) for hand in hands)
        wins_text = "\n".join(self._pot_win(win) for win in pot_wins)
        return (
            f"{self._markup.bold('Showdown!')} Let's have a look at the hands...\n\n"
            f"{hands_text}\n\n"
            "This means that:\n"
            f"{wins_text}"
        )

    # ------------------------------------------------------------------
    # Lobby and onboarding
    # ------------------------------------------------------------------
    def player_notification_message(
        self,
        player_id: UserId,
        hole_cards: Sequence[Slot],
        budget: Money,
        order: Sequence[UserId],
    ) -> str:
        m = self._markup
        return (
            f"Hi {m.user(player_id)}, here are your cards for this game:\n"
            f"{self._renderer.render(hole_cards)}\n"
            f"You have a budget of {self._chips(budget)}.\n"
            "We're playing no-limit Texas hold'em. You can read up on the rules here:\n"
            f"{m.link(HOLDEM_RULES_URL)}\n\n"
            f"Those are the participants, in order: {self._mentions(order)}\n"
            f"{m.bold('Have fun!')} {m.shortcode('black_joker')}"
        )

    def new_game_message(self, player_id: UserId, timeout_ms: int, buy_in: Money) -> str:
        m = self._markup
        return (
            f"{m.user(player_id)} wants to play Poker!\n"
            f"You have {timeout_ms // 1000} seconds to join by reacting with "
            f"{m.shortcode('handshake')}!\n"
            f"Everybody will start with {self._chips(buy_in)}.\n\n"
            f"{self._host(player_id)}"
        )

    def restart_game_message(
        self,
        player_id: UserId,
        budgets: Mapping[UserId, Money],
        timeout_ms: int,
        buy_in: Money,
    ) -> str:
        return (
            "This round of the game is over, but you can keep playing!\n"
            "Players of the last round, you now have:\n"
            f"{self._budgets(budgets)}\n\n"
            "You will enter the next round with this if you continue playing.\n"
            f"New players can also join! They will start with {self._chips(buy_in)}.\n"
            "If you want to play, react with "
            f"{self._markup.shortcode('handshake')} within the next "
            f"{timeout_ms // 1000} seconds.\n\n"
            f"{self._host(player_id)}"
        )

    def already_ingame_message(self, user_id: UserId) -> str:
        return f"You are already in a game, {self._markup.user(user_id)}!"

    def channel_occupied_message(self, channel_id: ChannelId, user_id: UserId) -> str:
        m = self._markup
        return (
            f"There already is an active poker session in {m.channel(channel_id)}, "
            f"{m.user(user_id)}"
        )

    def channel_waiting_message(self, channel_id: ChannelId, user_id: UserId) -> str:
        m = self._markup
        return (
            "There already is a game waiting for players to join in "
            f"{m.channel(channel_id)}. Maybe you want to join there, {m.user(user_id)}?"
        )

    def info_message(self, user_id: UserId, options_summary: str) -> str:
        m = self._markup
        return (
            f"Hi, {m.user(user_id)}!\n"
            "I am a bot that allows you to play Poker (No limit Texas hold' em) "
            "against up to 19 other people in chat. "
            f"To start a new game, simply type {m.code('holdem! <buy-in amount>')}. "
            "The (optional) buy-in is the amount of chips everyone will start with.\n"
            + m.code_block(
                "Here are the options for the command "
                "(option, default value, description):\n" + options_summary
            )
            + "\nGrab a bunch of friends and try it out!\n\n"
            "You can find links to invite the bot, to join the support server "
            f"and to view the source code here: {m.link(BOT_PAGE_URL)}"
        )

"""Round controller: drives one hit/stand cycle to a win or a loss."""

import logging
from dataclasses import dataclass

from transitions import Machine

from blackjack.cards import Deck
from blackjack.hand import Hand, evaluate_hands
from blackjack.rules import RuleSet
from blackjack.game.dealer import draw_until_threshold
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.io import GameIO
from blackjack.game.state import RoundState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundOutcome:
    """Final hands and result of a round."""

    player_won: bool
    player_hand: Hand
    dealer_hand: Hand
    deck: Deck


class RoundController:
    """
    Round state machine.

    The machine only tracks the phase; hands and deck are local values
    reassigned as the round progresses, never stored on the controller.
    """

    STATES = [s.name.lower() for s in RoundState]

    TRANSITIONS = [
        {"trigger": "deal", "source": "done", "dest": "player_turn"},
        {"trigger": "player_hits", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_stands", "source": "player_turn", "dest": "dealer_resolution"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "done"},
        {"trigger": "dealer_done", "source": "dealer_resolution", "dest": "done"},
        {"trigger": "abort", "source": "*", "dest": "done"},
    ]

    def __init__(
        self,
        io: GameIO,
        rules: RuleSet | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a round controller.

        Args:
            io: Source of hit/stand decisions and render sink
            rules: Table rules (uses defaults if not provided)
            events: Shared emitter; a new one feeding io.render if not provided
        """
        self.io = io
        self.rules = rules or RuleSet()
        if events is None:
            events = EventEmitter()
            events.subscribe(io.render)
        self.events = events

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="done",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def play(self, player_hand: Hand, dealer_hand: Hand, deck: Deck) -> RoundOutcome:
        """
        Play a dealt round to completion.

        Args:
            player_hand: The player's opening hand
            dealer_hand: The dealer's opening hand
            deck: Remaining deck after the initial deal

        Returns:
            The round outcome with the final hands

        If a GameIO call raises, the controller is reset to DONE before the
        exception propagates, so it can play the next round.
        """
        self.deal()
        try:
            return self._play_dealt(player_hand, dealer_hand, deck)
        except BaseException:
            self.abort()
            raise

    def _play_dealt(self, player_hand: Hand, dealer_hand: Hand, deck: Deck) -> RoundOutcome:
        player_won = False

        while self.state != RoundState.DONE:
            if self.state == RoundState.PLAYER_TURN:
                if player_hand.is_bust:
                    self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=player_hand.value)
                    player_won = False
                    self.player_busts()
                    continue

                self._show_hands(player_hand, dealer_hand, hide_dealer=True)
                if self.io.ask_stand():
                    self.events.emit_new(EventType.PLAYER_STAND, hand_value=player_hand.best_value)
                    self.player_stands()
                else:
                    card, deck = deck.deal_top()
                    player_hand = player_hand.add_card(card)
                    self.events.emit_new(
                        EventType.PLAYER_HIT,
                        card=str(card),
                        hand_value=player_hand.value,
                    )
                    self.player_hits()

            elif self.state == RoundState.DEALER_RESOLUTION:
                drawn_from = len(dealer_hand)
                dealer_hand, deck = draw_until_threshold(
                    dealer_hand, deck, self.rules.dealer_stand_threshold
                )
                for card in dealer_hand.cards[drawn_from:]:
                    self.events.emit_new(EventType.DEALER_HITS, card=str(card))

                if dealer_hand.is_bust:
                    self.events.emit_new(EventType.DEALER_BUSTS, hand_value=dealer_hand.value)
                else:
                    self.events.emit_new(EventType.DEALER_STANDS, hand_value=dealer_hand.best_value)

                player_won = evaluate_hands(player_hand, dealer_hand)
                self.dealer_done()

        logger.debug(
            "Round done: player %r, dealer %r, won=%s", player_hand, dealer_hand, player_won
        )
        self.events.emit_new(
            EventType.PLAYER_WINS if player_won else EventType.PLAYER_LOSES,
            player_value=player_hand.best_value,
            dealer_value=dealer_hand.best_value,
        )
        self._show_hands(player_hand, dealer_hand, hide_dealer=False)

        return RoundOutcome(
            player_won=player_won,
            player_hand=player_hand,
            dealer_hand=dealer_hand,
            deck=deck,
        )

    def _show_hands(self, player_hand: Hand, dealer_hand: Hand, hide_dealer: bool) -> None:
        self.events.emit_new(
            EventType.HANDS_SHOWN,
            dealer=dealer_hand.render(hide_first_card=hide_dealer),
            player=player_hand.render(),
            dealer_hidden=hide_dealer,
        )

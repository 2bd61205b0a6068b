"""Session controller: betting and credit across rounds."""

import logging
from dataclasses import dataclass

from transitions import Machine

from blackjack.cards import Deck
from blackjack.rules import RuleSet
from blackjack.game.dealer import deal_initial_hands
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.io import GameIO
from blackjack.game.round import RoundController, RoundOutcome
from blackjack.game.state import GameState, SessionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSummary:
    """How a session ended."""

    final_credit: int
    rounds_played: int
    reason: str  # "bankrupt" or "quit"


class SessionController:
    """
    Top-level game loop using a state machine.

    All randomness and player input come from the injected GameIO, and all
    output goes out as events rendered by it.
    """

    STATES = [s.name.lower() for s in SessionState]

    TRANSITIONS = [
        {"trigger": "place_bet", "source": "await_bet", "dest": "play_round"},
        {"trigger": "round_finished", "source": "play_round", "dest": "summarize"},
        {"trigger": "summarized", "source": "summarize", "dest": "ask_continue"},
        {"trigger": "next_round", "source": "ask_continue", "dest": "await_bet"},
        {"trigger": "end_game", "source": "ask_continue", "dest": "exit"},
    ]

    def __init__(
        self,
        io: GameIO,
        rules: RuleSet | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a new session.

        Args:
            io: Shuffle, prompt and render capabilities
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
            initial="await_bet",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> SessionState:
        """Get current session state as enum."""
        return SessionState[self._machine_state.upper()]  # type: ignore

    def run(self) -> SessionSummary:
        """
        Play rounds until the player quits or runs out of credit.

        Raises:
            RuntimeError: If the session has already been run
        """
        if self.state != SessionState.AWAIT_BET:
            raise RuntimeError(f"Cannot run session in state {self.state}")

        game = GameState(credit=self.rules.starting_credit)
        bet = 0
        player_won = False
        rounds_played = 0
        reason = ""

        self.events.emit_new(EventType.GAME_STARTED, credit=game.credit)

        while self.state != SessionState.EXIT:
            if self.state == SessionState.AWAIT_BET:
                bet = self._await_bet(game.credit)
                self.place_bet()

            elif self.state == SessionState.PLAY_ROUND:
                player_won = self._play_round().player_won
                rounds_played += 1
                self.round_finished()

            elif self.state == SessionState.SUMMARIZE:
                settled = game.settle(bet, player_won)
                logger.info(
                    "Round %d: bet %d, %s, credit %d -> %d",
                    rounds_played,
                    bet,
                    "won" if player_won else "lost",
                    game.credit,
                    settled.credit,
                )
                self.events.emit_new(
                    EventType.ROUND_ENDED,
                    bet=bet,
                    won=player_won,
                    start_credit=game.credit,
                    end_credit=settled.credit,
                )
                game = settled
                self.summarized()

            elif self.state == SessionState.ASK_CONTINUE:
                if game.is_broke:
                    reason = "bankrupt"
                    self.end_game()
                elif self.io.ask_continue():
                    self.next_round()
                else:
                    reason = "quit"
                    self.end_game()

        self.events.emit_new(EventType.GAME_ENDED, reason=reason, credit=game.credit)
        return SessionSummary(
            final_credit=game.credit,
            rounds_played=rounds_played,
            reason=reason,
        )

    def _await_bet(self, credit: int) -> int:
        """Prompt until the bet is positive and covered by the credit."""
        bet = self.io.ask_bet(credit)
        while not self.rules.is_valid_bet(bet, credit):
            self.events.emit_new(EventType.BET_REJECTED, bet=bet, credit=credit)
            bet = self.io.ask_bet(credit)

        self.events.emit_new(EventType.BET_PLACED, amount=bet, credit=credit)
        return bet

    def _play_round(self) -> RoundOutcome:
        """Shuffle a fresh deck, deal, and play the round out."""
        deck = Deck.build(self.io.shuffle)
        player_hand, dealer_hand, deck = deal_initial_hands(deck)
        self.events.emit_new(EventType.ROUND_STARTED)

        round_controller = RoundController(self.io, rules=self.rules, events=self.events)
        return round_controller.play(player_hand, dealer_hand, deck)

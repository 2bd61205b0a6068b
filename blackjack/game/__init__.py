"""Game controllers, dealer policy and event system."""

from blackjack.game.events import GameEvent, EventType, EventEmitter
from blackjack.game.state import GameState, RoundState, SessionState
from blackjack.game.io import GameIO
from blackjack.game.dealer import deal_initial_hands, draw_until_threshold
from blackjack.game.round import RoundController, RoundOutcome
from blackjack.game.session import SessionController, SessionSummary

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GameState",
    "RoundState",
    "SessionState",
    "GameIO",
    "deal_initial_hands",
    "draw_until_threshold",
    "RoundController",
    "RoundOutcome",
    "SessionController",
    "SessionSummary",
]

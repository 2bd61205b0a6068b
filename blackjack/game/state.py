"""Round and session states, and the credit snapshot."""

from dataclasses import dataclass
from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: PLAYER_TURN → (hit) PLAYER_TURN | (stand) DEALER_RESOLUTION → DONE
    """

    PLAYER_TURN = auto()
    DEALER_RESOLUTION = auto()
    DONE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class SessionState(Enum):
    """
    Session state machine states.

    Flow: AWAIT_BET → PLAY_ROUND → SUMMARIZE → ASK_CONTINUE → AWAIT_BET | EXIT
    """

    AWAIT_BET = auto()
    PLAY_ROUND = auto()
    SUMMARIZE = auto()
    ASK_CONTINUE = auto()

    # Terminal (bankrupt or player quit)
    EXIT = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of the player's credit."""

    credit: int

    def settle(self, bet: int, won: bool) -> "GameState":
        """Return the snapshot after a round staking `bet` resolves."""
        return GameState(self.credit + (bet if won else -bet))

    @property
    def is_broke(self) -> bool:
        return self.credit <= 0

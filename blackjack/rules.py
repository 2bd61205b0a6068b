"""Blackjack table rules."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config import GameConfig

# Dealer keeps drawing while the plain hand value is below this
DEALER_STAND_THRESHOLD = 17

STARTING_CREDIT = 100


@dataclass(frozen=True)
class RuleSet:
    """
    Blackjack table rules configuration.

    Only the knobs that differ between revisions of the house rules.
    """

    dealer_stand_threshold: int = DEALER_STAND_THRESHOLD
    starting_credit: int = STARTING_CREDIT

    def __post_init__(self) -> None:
        """Validate rule values."""
        if not 2 <= self.dealer_stand_threshold <= 21:
            raise ValueError("dealer_stand_threshold must be between 2 and 21")
        if self.starting_credit < 1:
            raise ValueError("starting_credit must be at least 1")

    def is_valid_bet(self, bet: int, credit: int) -> bool:
        """Check that a bet is positive and covered by the current credit."""
        return 0 < bet <= credit

    @classmethod
    def standard(cls) -> "RuleSet":
        """Dealer stands on 17 (conventional casino rule)."""
        return cls(dealer_stand_threshold=17)

    @classmethod
    def stand_on_18(cls) -> "RuleSet":
        """Dealer draws to 18."""
        return cls(dealer_stand_threshold=18)

    @classmethod
    def from_config(cls, game_config: "GameConfig") -> "RuleSet":
        """Build rules from the environment-driven game configuration."""
        return cls(
            dealer_stand_threshold=game_config.dealer_stand_threshold,
            starting_credit=game_config.starting_credit,
        )

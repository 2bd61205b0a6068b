"""Hand evaluation for blackjack."""

from dataclasses import dataclass
from typing import Iterator

from blackjack.cards import Card

WINNING_VALUE = 21
ACE_BONUS = 10


@dataclass(frozen=True)
class Hand:
    """An immutable blackjack hand with value calculation."""

    cards: tuple[Card, ...] = ()

    def add_card(self, card: Card) -> "Hand":
        """Return a new hand with the card appended."""
        return Hand(self.cards + (card,))

    @property
    def value(self) -> int:
        """Sum of the base card values (every Ace counts 1)."""
        return sum(card.value for card in self.cards)

    @property
    def contains_ace(self) -> bool:
        return any(card.is_ace for card in self.cards)

    @property
    def alternate_value(self) -> int:
        """Hand value with one Ace counted as 11."""
        if self.contains_ace:
            return self.value + ACE_BONUS
        return self.value

    @property
    def best_value(self) -> int:
        """
        The highest total that doesn't exceed 21.

        Returns 0 if both the plain and the alternate total bust.
        """
        candidates = [
            total
            for total in (self.value, self.alternate_value)
            if total <= WINNING_VALUE
        ]
        return max(candidates, default=0)

    @property
    def is_bust(self) -> bool:
        """Check if the hand has busted (plain value > 21)."""
        return self.value > WINNING_VALUE

    @property
    def is_blackjack(self) -> bool:
        """Check if either total is exactly 21."""
        return self.value == WINNING_VALUE or self.alternate_value == WINNING_VALUE

    def wins_over(self, other: "Hand") -> bool:
        """Check if this hand beats another. Ties lose."""
        return self.best_value > other.best_value

    def render(self, hide_first_card: bool = False) -> str:
        """
        Render the hand for display.

        Args:
            hide_first_card: Show only the first card's value followed by a
                mask for the rest (the dealer's hand during the player turn)
        """
        if hide_first_card:
            if not self.cards:
                return "X"
            return f"{self.cards[0].value} X"
        return ", ".join(str(card.value) for card in self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.best_value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_bust:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({list(self.cards)!r}, value={self.value})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> bool:
    """
    Compare player and dealer hands.

    Returns:
        True if the player wins, False otherwise (pushes go to the dealer)
    """
    # Player busts always loses
    if player_hand.is_bust:
        return False

    # Dealer busts, player wins
    if dealer_hand.is_bust:
        return True

    return player_hand.wins_over(dealer_hand)

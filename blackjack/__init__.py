"""Console blackjack - the rules engine is UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.rules import RuleSet

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "RuleSet",
]

"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Callable, Iterator, Sequence


class Suit(Enum):
    """Card suits."""

    HEARTS = auto()
    DIAMONDS = auto()
    SPADES = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.SPADES: "♠",
            Suit.CLUBS: "♣",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks. Enum values are ordinals; points come from blackjack_value."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the base point value (Ace = 1, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 1
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.blackjack_value == 10


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the base point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


ShuffleFn = Callable[[Sequence[Card]], Sequence[Card]]


def standard_cards() -> tuple[Card, ...]:
    """Return the 52 cards of a standard deck in canonical order."""
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


def random_shuffle(rng: Random | None = None) -> ShuffleFn:
    """
    Build a shuffle function backed by a random number generator.

    Args:
        rng: Random number generator (pass a seeded one for reproducible games)

    Returns:
        A function returning a uniformly random permutation of its input
    """
    rng = rng or Random()

    def shuffle(cards: Sequence[Card]) -> list[Card]:
        return rng.sample(list(cards), len(cards))

    return shuffle


@dataclass(frozen=True)
class Deck:
    """
    An immutable, ordered deck of remaining cards.

    Dealing never mutates the deck; it returns the dealt card together with
    a new Deck holding the rest.
    """

    cards: tuple[Card, ...] = ()

    @classmethod
    def build(cls, shuffle_fn: ShuffleFn) -> "Deck":
        """
        Build a full 52-card deck in the order produced by shuffle_fn.

        Raises:
            ValueError: If shuffle_fn does not return a permutation of the
                standard deck
        """
        canonical = standard_cards()
        shuffled = tuple(shuffle_fn(canonical))
        if len(shuffled) != len(canonical) or set(shuffled) != set(canonical):
            raise ValueError("Shuffle must return a permutation of the 52-card deck")
        return cls(shuffled)

    def deal_top(self) -> tuple[Card, "Deck"]:
        """
        Deal the top card.

        Raises:
            IndexError: If the deck is empty
        """
        if not self.cards:
            raise IndexError("Cannot deal from empty deck")
        return self.cards[0], Deck(self.cards[1:])

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self.cards)

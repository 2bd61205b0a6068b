"""Pytest fixtures for blackjack tests."""

from random import Random
from typing import Sequence

import pytest

from blackjack.cards import Card, Deck, random_shuffle
from blackjack.game.events import GameEvent
from blackjack.game.io import GameIO
from blackjack.hand import Hand


def make_hand(*cards: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    return Hand(tuple(Card.from_string(c) for c in cards))


def stack_shuffle(*top: str):
    """Shuffle function that puts the given cards on top, rest in canonical order."""
    top_cards = [Card.from_string(c) for c in top]

    def shuffle(cards: Sequence[Card]) -> list[Card]:
        rest = [card for card in cards if card not in top_cards]
        return top_cards + rest

    return shuffle


class ScriptedIO(GameIO):
    """GameIO fake that replays canned answers and records what it was shown."""

    def __init__(self, bets=(), stands=(), continues=(), shuffle_fn=None) -> None:
        self.bets = list(bets)
        self.stands = list(stands)
        self.continues = list(continues)
        self.shuffle_fn = shuffle_fn or (lambda cards: list(cards))
        self.bet_prompts: list[int] = []
        self.continue_prompts = 0
        self.events: list[GameEvent] = []

    def shuffle(self, cards: Sequence[Card]) -> Sequence[Card]:
        return self.shuffle_fn(cards)

    def ask_bet(self, credit: int) -> int:
        self.bet_prompts.append(credit)
        return self.bets.pop(0)

    def ask_continue(self) -> bool:
        self.continue_prompts += 1
        return self.continues.pop(0)

    def ask_stand(self) -> bool:
        return self.stands.pop(0)

    def render(self, event: GameEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list:
        return [event.event_type for event in self.events]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck.build(random_shuffle(rng))


@pytest.fixture
def hand_of():
    """Factory for hands from card strings."""
    return make_hand


@pytest.fixture
def stacked():
    """Factory for shuffle functions with a fixed top of the deck."""
    return stack_shuffle


@pytest.fixture
def scripted_io():
    """Factory for scripted GameIO fakes."""
    return ScriptedIO


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand (A-K)."""
    return make_hand("AS", "KH")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand (K-Q-2)."""
    return make_hand("KS", "QH", "2C")

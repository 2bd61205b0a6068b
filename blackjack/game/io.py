"""Capabilities the game engine needs from its surroundings."""

from abc import ABC, abstractmethod
from typing import Sequence

from blackjack.cards import Card
from blackjack.game.events import GameEvent


class GameIO(ABC):
    """
    Randomness, player input and display, injected into the controllers.

    The engine never touches the terminal; everything it needs from the
    outside world comes through an instance of this class.
    """

    @abstractmethod
    def shuffle(self, cards: Sequence[Card]) -> Sequence[Card]:
        """Return the cards in shuffled order."""
        ...

    @abstractmethod
    def ask_bet(self, credit: int) -> int:
        """Ask for a bet. Unparseable input should come back as 0."""
        ...

    @abstractmethod
    def ask_continue(self) -> bool:
        """Ask whether to play another round."""
        ...

    @abstractmethod
    def ask_stand(self) -> bool:
        """Ask hit or stand. True means stand."""
        ...

    @abstractmethod
    def render(self, event: GameEvent) -> None:
        """Display a game event."""
        ...

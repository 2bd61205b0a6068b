"""Terminal implementation of the game's I/O capabilities."""

from random import Random
from typing import Callable, Sequence

from blackjack.cards import Card, random_shuffle
from blackjack.game.events import EventType, GameEvent
from blackjack.game.io import GameIO

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def read_int(prompt: str, input_fn: InputFn = input) -> int:
    """Read an integer. Anything unparseable comes back as 0."""
    try:
        return int(input_fn(prompt).strip())
    except ValueError:
        return 0


def get_answer(
    question: str,
    possible_answers: Sequence[str],
    input_fn: InputFn = input,
) -> str:
    """Ask until the (lower-cased) answer is one of possible_answers."""
    prompt = f"{question}? Enter one of ({','.join(possible_answers)}): "
    answer = ""
    while answer not in possible_answers:
        answer = input_fn(prompt).strip().lower()
    return answer


def format_event(event: GameEvent) -> list[str]:
    """
    Turn a game event into the lines printed for it.

    Events with nothing to show map to an empty list.
    """
    data = event.data
    event_type = event.event_type

    if event_type == EventType.BET_REJECTED:
        return ["Bad input. Try again"]
    if event_type == EventType.HANDS_SHOWN:
        return [f"Dealer hand: {data['dealer']}", f"Player hand: {data['player']}"]
    if event_type == EventType.PLAYER_WINS:
        return ["*** You win ***"]
    if event_type == EventType.PLAYER_LOSES:
        return ["*** You lose! ***"]
    if event_type == EventType.ROUND_ENDED:
        return [
            "======= Game Summary =======",
            f"Start-Credit: [ {data['start_credit']} ],  End-Credit: [ {data['end_credit']} ]",
            "",
        ]
    if event_type == EventType.GAME_ENDED:
        if data.get("reason") == "bankrupt":
            return ["You have no money left"]
        return ["Exiting"]
    return []


class ConsoleIO(GameIO):
    """Reads answers from stdin and prints events to stdout."""

    def __init__(
        self,
        rng: Random | None = None,
        input_fn: InputFn | None = None,
        output_fn: OutputFn | None = None,
    ) -> None:
        self._shuffle = random_shuffle(rng)
        self._input = input_fn or input
        self._output = output_fn or print

    def shuffle(self, cards: Sequence[Card]) -> Sequence[Card]:
        return self._shuffle(cards)

    def ask_bet(self, credit: int) -> int:
        return read_int(f"Please enter bet (credit: {credit}): ", self._input)

    def ask_continue(self) -> bool:
        return get_answer("Do you want to continue", ["y", "n"], self._input) == "y"

    def ask_stand(self) -> bool:
        return get_answer("Hit or Stand", ["h", "s"], self._input) == "s"

    def render(self, event: GameEvent) -> None:
        for line in format_event(event):
            self._output(line)

    def wait_for_start(self) -> None:
        """Show the welcome banner and wait for Enter."""
        self._output("Welcome to BlackJack. Press any key to start playing.")
        self._input("")

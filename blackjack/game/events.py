"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of game events."""

    # Game flow events
    GAME_STARTED = auto()
    GAME_ENDED = auto()
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()

    # Betting events
    BET_PLACED = auto()
    BET_REJECTED = auto()

    # Table display
    HANDS_SHOWN = auto()

    # Player action events
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()

    # Dealer events
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()

    # Outcome events
    PLAYER_BUSTS = auto()
    PLAYER_WINS = auto()
    PLAYER_LOSES = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are the only channel from the rules engine to the presentation
    layer; the GameIO render sink subscribes to them.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Simple event emitter for game events.

    Allows subscribing to specific event types or all events.
    """

    def __init__(self) -> None:
        """Initialize the event emitter."""
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Unsubscribe from events.

        Raises:
            ValueError: If the handler was never subscribed to event_type
        """
        self._handlers.get(event_type, []).remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Emit an event to type-specific subscribers, then catch-all ones."""
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """
        Create and emit a new event.

        Args:
            event_type: Type of event
            **data: Event data

        Returns:
            The created event
        """
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def clear_history(self) -> None:
        self._event_history.clear()

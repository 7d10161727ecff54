"""
Event system for game sessions.

The session publishes what happens on each turn (moves, encounters, level
changes) to an event bus. Handlers subscribe to respond to these events
without the session knowing about them, e.g. to log or to record history.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class Event(Enum):
    """Event types that can occur during a game session."""

    # Level lifecycle
    LEVEL_START = auto()  # kwargs: level
    LEVEL_END = auto()  # kwargs: level

    # Player movement events
    PLAYER_MOVED = auto()  # kwargs: row, col
    MOVE_REJECTED = auto()  # kwargs: row, col, reason

    # Encounter events
    ENCOUNTER_TRIGGERED = auto()  # kwargs: kind
    ENCOUNTER_RESOLVED = auto()  # kwargs: kind, result

    # Inventory events
    ITEM_ADDED = auto()  # kwargs: item
    ITEM_REMOVED = auto()  # kwargs: item

    # Session end
    GAME_OVER = auto()
    GAME_COMPLETE = auto()


@dataclass
class EventData:
    """Container for event data passed to handlers."""

    event: Event
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        if self.kwargs:
            kwargs_str = ", ".join(f"{k}={v}" for k, v in self.kwargs.items())
            return f"EventData({self.event.name}, {kwargs_str})"
        return f"EventData({self.event.name})"


# Event handler signature: takes event data, returns nothing
EventHandler = Callable[[EventData], None]


class EventBus:
    """
    Event bus for publishing and subscribing to game events.

    Handlers run synchronously, in subscription order, inside `emit`.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Event, List[EventHandler]] = {}
        self._debug: bool = False

    def set_debug(self, debug: bool) -> None:
        """In debug mode handler errors propagate instead of being logged."""
        self._debug = debug

    def subscribe(self, event: Event, handler: EventHandler) -> None:
        if event not in self._handlers:
            self._handlers[event] = []
        self._handlers[event].append(handler)

    def unsubscribe(self, event: Event, handler: EventHandler) -> None:
        """
        Unsubscribe a handler from an event type.

        Raises:
            ValueError: If handler was not subscribed to this event
        """
        if event not in self._handlers:
            raise ValueError(f"No handlers registered for event {event}")
        if handler not in self._handlers[event]:
            raise ValueError(f"Handler not subscribed to event {event}")
        self._handlers[event].remove(handler)

    def emit(self, event: Event, **kwargs: Any) -> None:
        """
        Emit an event, triggering all subscribed handlers.

        Args:
            event: The event type to emit
            **kwargs: Event-specific data passed to handlers
        """
        event_data = EventData(event=event, kwargs=kwargs)

        for handler in list(self._handlers.get(event, [])):
            try:
                handler(event_data)
            except Exception:
                # One handler failing shouldn't stop others
                logger.exception("Handler error for %s", event.name)
                if self._debug:
                    raise

    def clear(self) -> None:
        """Remove all event handlers."""
        self._handlers.clear()

    def handler_count(self, event: Optional[Event] = None) -> int:
        """
        Get the number of handlers registered.

        Args:
            event: If provided, count handlers for this event only.
                   If None, count total handlers across all events.
        """
        if event is not None:
            return len(self._handlers.get(event, []))
        return sum(len(handlers) for handlers in self._handlers.values())


def log_events(bus: EventBus) -> EventHandler:
    """
    Subscribe a handler that writes every event to the debug log.

    Returns the handler so callers can unsubscribe it.
    """

    def handler(event_data: EventData) -> None:
        logger.debug("Event: %r", event_data)

    for event in Event:
        bus.subscribe(event, handler)
    return handler

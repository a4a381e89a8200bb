# src/finsim/core/event_bus.py

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Union

from .events import EVENT_PAYLOAD_TYPES, GameEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


class EventBus:
    """
    A synchronous, typed publish/subscribe registry.

    Handlers run in subscription order, inside the publishing call. Errors
    raised by a handler are not caught here: they propagate to whoever
    triggered the notification, and later handlers are skipped.
    """

    def __init__(self, config: Any = None) -> None:
        self._subscribers: Dict[GameEvent, List[EventHandler]] = defaultdict(list)
        self.debug_logging = bool(getattr(config, "enable_debug_logging", False))

    def subscribe(self, event_type: Union[GameEvent, str], handler: EventHandler) -> None:
        """Subscribes a handler to an event, by enum member or by its wire name."""
        self._subscribers[GameEvent(event_type)].append(handler)

    def publish(self, event_type: GameEvent, payload: Any) -> None:
        """Delivers a payload to every handler subscribed to the event."""
        expected = EVENT_PAYLOAD_TYPES[event_type]
        if not isinstance(payload, expected):
            raise TypeError(
                f"Event '{event_type.value}' expects a {expected.__name__} payload, "
                f"got {type(payload).__name__}"
            )

        handlers = self._subscribers.get(event_type, [])
        if self.debug_logging:
            logger.debug(f"Publishing event '{event_type.value}' to {len(handlers)} handler(s)")

        for handler in list(handlers):
            handler(payload)

    def subscriber_count(self, event_type: Union[GameEvent, str]) -> int:
        return len(self._subscribers.get(GameEvent(event_type), []))

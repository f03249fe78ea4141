"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.

The physics world announces trigger entries, the HUD and keyboard announce
restart requests, and controllers subscribe to whatever they react to.
Each scene owns its own EventManager, so a scene reload drops every
subscription together with the scene.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from pushball.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class TriggerEnteredEvent(BaseEvent):
    """Dispatched once when a named body starts overlapping a trigger region."""
    region: str
    body_name: str


@dataclass(frozen=True)
class TriggerExitedEvent(BaseEvent):
    """Dispatched once when a named body stops overlapping a trigger region."""
    region: str
    body_name: str


@dataclass(frozen=True)
class RestartRequestedEvent(BaseEvent):
    """Dispatched when the player asks for a full level restart."""
    source: str = "ui"


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Remove a callback from an event type.

        Args:
            event_type: Event class
            callback: Function to remove
        """
        subscribers = self._subscribers.get(event_type)
        if subscribers and callback in subscribers:
            subscribers.remove(callback)

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped; the remaining
        subscribers still receive the event.

        Args:
            event: Event instance to dispatch
        """
        subscribers = self._subscribers.get(type(event))
        if not subscribers:
            return

        for callback in list(subscribers):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers. Call on scene exit."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """
        Get count of subscribers.

        Args:
            event_type: Specific event type, or None for total

        Returns:
            Number of subscribers
        """
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())

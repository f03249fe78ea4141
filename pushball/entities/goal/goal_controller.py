"""
goal_controller.py
------------------
Watches the goal region and owns the restart command.

- When the body named "Ball" enters the goal region, the victory
  indicator is made visible. Nothing else entering has any effect, and
  the indicator is never hidden again for the life of the scene.
- A restart request reloads the whole scene through the injected
  reloader; the fresh scene comes with a fresh, hidden indicator.
"""

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.runtime.game_settings import Goal
from pushball.core.services.event_manager import RestartRequestedEvent, TriggerEnteredEvent


class GoalController:
    """Victory reveal + scene restart."""

    def __init__(self, victory_indicator, reloader,
                 region_name: str = Goal.REGION_NAME,
                 target_body: str = Goal.TARGET_BODY):
        """
        Args:
            victory_indicator: Element with a boolean 'visible' attribute
            reloader: Object exposing reload_scene()
            region_name: Trigger region this controller listens to
            target_body: Body name that wins the level
        """
        self.victory_indicator = victory_indicator
        self.reloader = reloader
        self.region_name = region_name
        self.target_body = target_body
        self._events = None

    @property
    def victory_reached(self) -> bool:
        return bool(self.victory_indicator.visible)

    # ===========================================================
    # Event Wiring
    # ===========================================================

    def bind(self, events) -> None:
        """Subscribe to trigger and restart events on a scene's EventManager."""
        self._events = events
        events.subscribe(TriggerEnteredEvent, self._handle_trigger_event)
        events.subscribe(RestartRequestedEvent, self._handle_restart_event)

    def unbind(self) -> None:
        if self._events is None:
            return
        self._events.unsubscribe(TriggerEnteredEvent, self._handle_trigger_event)
        self._events.unsubscribe(RestartRequestedEvent, self._handle_restart_event)
        self._events = None

    def _handle_trigger_event(self, event: TriggerEnteredEvent) -> None:
        if event.region == self.region_name:
            self.on_trigger_entered(event.body_name)

    def _handle_restart_event(self, event: RestartRequestedEvent) -> None:
        self.on_restart_requested()

    # ===========================================================
    # Callbacks
    # ===========================================================

    def on_trigger_entered(self, body_name: str) -> None:
        """Reveal the victory indicator if the target body entered."""
        if body_name != self.target_body:
            return
        if self.victory_indicator.visible:
            return

        self.victory_indicator.visible = True
        DebugLogger.action(f"'{body_name}' reached '{self.region_name}' - victory", category="goal")

    def on_restart_requested(self) -> None:
        """Tear down and rebuild the whole scene."""
        DebugLogger.action("Restart requested", category="goal")
        self.reloader.reload_scene()

"""
test_goal_controller.py
-----------------------
Tests for GoalController.

Covers:
- Only the body named "Ball" reveals the victory indicator
- The indicator stays visible afterwards
- Restart always goes through the reloader
- Event wiring on a real EventManager
"""

from unittest.mock import MagicMock

import pytest

from conftest import make_victory_indicator
from pushball.core.services.event_manager import (
    RestartRequestedEvent,
    TriggerEnteredEvent,
    TriggerExitedEvent,
)
from pushball.entities.goal.goal_controller import GoalController


@pytest.fixture
def indicator():
    return make_victory_indicator(visible=False)


@pytest.fixture
def reloader():
    return MagicMock()


@pytest.fixture
def goal(indicator, reloader):
    return GoalController(indicator, reloader)


class TestTriggerEntered:

    @pytest.mark.parametrize("name", ["Player", "Crate", "Wall", "ball", "Ball2", ""])
    def test_other_bodies_do_not_reveal(self, goal, indicator, name):
        goal.on_trigger_entered(name)
        assert indicator.visible is False
        assert not goal.victory_reached

    def test_ball_reveals(self, goal, indicator):
        goal.on_trigger_entered("Ball")
        assert indicator.visible is True
        assert goal.victory_reached

    def test_stays_visible_after_unrelated_entries(self, goal, indicator):
        goal.on_trigger_entered("Ball")
        goal.on_trigger_entered("Player")
        goal.on_trigger_entered("Crate")
        assert indicator.visible is True

    def test_repeat_ball_entry_is_harmless(self, goal, indicator):
        goal.on_trigger_entered("Ball")
        goal.on_trigger_entered("Ball")
        assert indicator.visible is True

    def test_custom_target_body(self, indicator, reloader):
        goal = GoalController(indicator, reloader, target_body="Puck")
        goal.on_trigger_entered("Ball")
        assert indicator.visible is False
        goal.on_trigger_entered("Puck")
        assert indicator.visible is True


class TestRestart:

    def test_restart_calls_reloader(self, goal, reloader):
        goal.on_restart_requested()
        reloader.reload_scene.assert_called_once_with()

    def test_restart_after_victory_still_reloads(self, goal, reloader):
        goal.on_trigger_entered("Ball")
        goal.on_restart_requested()
        goal.on_restart_requested()
        assert reloader.reload_scene.call_count == 2


class TestEventWiring:

    def test_bound_controller_reacts_to_events(self, goal, indicator, reloader, events):
        goal.bind(events)

        events.dispatch(TriggerEnteredEvent(region="Goal", body_name="Ball"))
        assert indicator.visible is True

        events.dispatch(RestartRequestedEvent(source="keyboard"))
        reloader.reload_scene.assert_called_once()

    def test_other_regions_are_ignored(self, goal, indicator, events):
        goal.bind(events)
        events.dispatch(TriggerEnteredEvent(region="Spawn", body_name="Ball"))
        assert indicator.visible is False

    def test_exit_events_do_not_hide(self, goal, indicator, events):
        goal.bind(events)
        events.dispatch(TriggerEnteredEvent(region="Goal", body_name="Ball"))
        events.dispatch(TriggerExitedEvent(region="Goal", body_name="Ball"))
        assert indicator.visible is True

    def test_unbind_stops_reactions(self, goal, indicator, reloader, events):
        goal.bind(events)
        goal.unbind()

        events.dispatch(TriggerEnteredEvent(region="Goal", body_name="Ball"))
        events.dispatch(RestartRequestedEvent())

        assert indicator.visible is False
        reloader.reload_scene.assert_not_called()
        assert events.get_subscriber_count() == 0

"""
test_scene_manager.py
---------------------
Tests for SceneManager lifecycle and the scene-reload primitive.
"""

from unittest.mock import MagicMock

import pytest

from pushball.core.services.scene_manager import SceneManager
from pushball.scenes.base_scene import BaseScene
from pushball.scenes.scene_state import SceneState


class RecordingScene(BaseScene):
    """Scene that records its lifecycle calls."""

    instances = []

    def __init__(self, services):
        super().__init__(services)
        self.calls = []
        self.loaded_with = None
        RecordingScene.instances.append(self)

    def on_load(self, **scene_data):
        self.calls.append("load")
        self.loaded_with = scene_data

    def on_enter(self):
        self.calls.append("enter")

    def on_exit(self):
        self.calls.append("exit")

    def update(self, dt):
        self.calls.append("update")

    def draw(self, draw_manager):
        self.calls.append("draw")

    def handle_event(self, event):
        self.calls.append("event")


@pytest.fixture
def manager(mock_input_manager, mock_draw_manager):
    RecordingScene.instances = []
    return SceneManager(mock_input_manager, mock_draw_manager, {"Level": RecordingScene},
                        level_file="level_01.json")


def test_set_scene_runs_lifecycle(manager, mock_input_manager):
    manager.set_scene("Level", seed=3)

    scene = manager.active_scene
    assert scene.calls == ["load", "enter"]
    assert scene.state is SceneState.ACTIVE
    assert scene.loaded_with == {"seed": 3}
    mock_input_manager.set_context.assert_called_with("gameplay")


def test_globals_are_available_to_scenes(manager):
    manager.set_scene("Level")
    assert manager.active_scene.services.get_global("level_file") == "level_01.json"


def test_reload_builds_a_fresh_instance(manager):
    manager.set_scene("Level", seed=3)
    old = manager.active_scene

    manager.reload_scene()

    new = manager.active_scene
    assert new is not old
    assert old.calls == ["load", "enter", "exit"]
    assert old.state is SceneState.INACTIVE
    assert new.state is SceneState.ACTIVE
    assert new.loaded_with == {"seed": 3}
    assert manager.reload_count == 1


def test_reload_through_service_locator(manager):
    manager.set_scene("Level")
    old = manager.active_scene

    old.services.reload_scene()

    assert manager.active_scene is not old
    assert manager.active_name == "Level"


def test_reload_without_scene_is_noop(manager):
    manager.reload_scene()
    assert manager.active_scene is None
    assert manager.reload_count == 0


def test_unknown_scene_is_ignored(manager):
    manager.set_scene("Level")
    current = manager.active_scene

    manager.set_scene("Credits")

    assert manager.active_scene is current


def test_update_draw_event_delegation(manager):
    manager.set_scene("Level")
    manager.update(1 / 60)
    manager.draw(MagicMock())
    manager.handle_event(MagicMock())
    assert manager.active_scene.calls[-3:] == ["update", "draw", "event"]


def test_shutdown_exits_scene(manager):
    manager.set_scene("Level")
    scene = manager.active_scene
    manager.shutdown()
    assert scene.calls[-1] == "exit"
    assert manager.active_scene is None

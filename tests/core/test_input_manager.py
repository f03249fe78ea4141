"""
test_input_manager.py
---------------------
Tests for InputManager action queries and edge detection.
"""

import pygame

from conftest import key_state
from pushball.core.services.input_manager import InputManager


class TestActions:

    def test_held_follows_any_bound_key(self):
        im = InputManager()

        im.update(key_state(pygame.K_a))
        assert im.action_held("move_left")

        im.update(key_state(pygame.K_LEFT))
        assert im.action_held("move_left")

        im.update(key_state())
        assert not im.action_held("move_left")

    def test_pressed_is_a_single_step_edge(self):
        im = InputManager()

        im.update(key_state(pygame.K_r))
        assert im.action_pressed("restart")

        im.update(key_state(pygame.K_r))
        assert not im.action_pressed("restart")
        assert im.action_held("restart")

        im.update(key_state())
        assert im.action_released("restart")

    def test_unknown_action_is_false(self):
        im = InputManager()
        im.update(key_state(pygame.K_a))
        assert not im.action_held("jump")
        assert not im.action_pressed("jump")

    def test_custom_bindings(self):
        im = InputManager({"gameplay": {"move_left": [pygame.K_j]}, "system": {}})
        im.update(key_state(pygame.K_j))
        assert im.action_held("move_left")


class TestContext:

    def test_context_switch_suppresses_held_key_edge(self):
        im = InputManager()
        im.update(key_state(pygame.K_r))
        assert im.action_pressed("restart")

        im.set_context("gameplay")
        assert not im.action_pressed("restart")

        im.update(key_state(pygame.K_r))
        assert not im.action_pressed("restart")

    def test_unknown_context_is_ignored(self):
        im = InputManager()
        im.set_context("menu")
        assert im.context == "gameplay"

    def test_system_context_cannot_be_selected(self):
        im = InputManager()
        im.set_context("system")
        assert im.context == "gameplay"


class TestSystemActions:

    def test_quit_hotkey(self):
        im = InputManager()
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
        assert im.is_system_action("quit", event)
        assert not im.is_system_action("toggle_debug", event)

    def test_non_keydown_events_never_match(self):
        im = InputManager()
        event = pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE)
        assert not im.is_system_action("quit", event)

"""
input_manager.py
----------------
Keyboard input system with context-aware action queries.

Provides:
- Context-based bindings (gameplay, system)
- Edge detection (pressed, held, released)
- Per-action held queries for the character controller
"""

import pygame

from pushball.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "move_left": [pygame.K_LEFT, pygame.K_a],
        "move_right": [pygame.K_RIGHT, pygame.K_d],
        "move_up": [pygame.K_UP, pygame.K_w],
        "move_down": [pygame.K_DOWN, pygame.K_s],
        "restart": [pygame.K_r],
    },
    "system": {
        "quit": [pygame.K_ESCAPE],
        "toggle_debug": [pygame.K_F3],
    },
}


class InputManager:
    """
    Keyboard input with automatic edge detection.

    Usage:
        input_manager.update()                        # Once per fixed step

        if input_manager.action_held("move_left"):    # Continuous
            ...

        if input_manager.action_pressed("restart"):   # Rising edge
            ...
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Initialize input system.

        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.context = "gameplay"

        self._init_lookup_tables()
        self._init_action_registry()
        self._validate_bindings()

    def _init_lookup_tables(self):
        """Build action -> keys lookup per context."""
        self._action_to_keys_cache = {}

        for context_name, actions in self.key_bindings.items():
            self._action_to_keys_cache[context_name] = {
                action_name: tuple(keys) for action_name, keys in actions.items()
            }

        self._active_action_to_keys = self._action_to_keys_cache[self.context]

    def _init_action_registry(self):
        """Initialize state tracking for all non-system actions."""
        self._actions = {}

        for context_name, actions in self.key_bindings.items():
            if context_name == "system":
                continue

            for action_name in actions:
                self._actions[action_name] = {
                    "pressed": False,
                    "held": False,
                    "released": False,
                    "prev_held": False,
                }

    def _validate_bindings(self):
        """Warn if system keys overlap with gameplay keys."""
        system_keys = set()
        for keys in self.key_bindings.get("system", {}).values():
            system_keys.update(keys)

        other_keys = set()
        for ctx, actions in self.key_bindings.items():
            if ctx == "system":
                continue
            for keys in actions.values():
                other_keys.update(keys)

        overlap = system_keys & other_keys
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}", category="input")

    # ===========================================================
    # Context Management
    # ===========================================================

    def set_context(self, name: str):
        """
        Switch input context.

        Edge states are reset so a key held across the switch does not
        register as a fresh press.

        Args:
            name: Context name ("gameplay", ...)
        """
        if name not in self.key_bindings or name == "system":
            DebugLogger.warn(f"Unknown context: {name}", category="input")
            return

        self.context = name
        self._active_action_to_keys = self._action_to_keys_cache[name]

        for state in self._actions.values():
            state["pressed"] = False
            state["released"] = False
            state["prev_held"] = state["held"]

        DebugLogger.state(f"Context switched to [{name.upper()}]", category="input")

    # ===========================================================
    # Public API: Action Queries
    # ===========================================================

    def action_pressed(self, action: str) -> bool:
        """Check if action was just pressed this step (rising edge)."""
        state = self._actions.get(action)
        return state["pressed"] if state else False

    def action_held(self, action: str) -> bool:
        """Check if action is currently held down."""
        state = self._actions.get(action)
        return state["held"] if state else False

    def action_released(self, action: str) -> bool:
        """Check if action was just released this step (falling edge)."""
        state = self._actions.get(action)
        return state["released"] if state else False

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, keys=None):
        """
        Poll the keyboard. Call once per fixed step.

        Args:
            keys: Key state mapping indexable by key code
                  (defaults to pygame.key.get_pressed())
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        for action in self._active_action_to_keys:
            self._update_action_state(action, keys)

    def _update_action_state(self, action: str, keys):
        """
        Update action state with edge detection.

        - pressed: False -> True (rising edge)
        - released: True -> False (falling edge)
        - held: current state
        """
        state = self._actions[action]
        current_held = self._is_action_pressed(action, keys)
        prev_held = state["prev_held"]

        state["pressed"] = current_held and not prev_held
        state["released"] = not current_held and prev_held
        state["held"] = current_held
        state["prev_held"] = current_held

    # ===========================================================
    # System Input (Global Hotkeys)
    # ===========================================================

    def is_system_action(self, action: str, event) -> bool:
        """
        Check whether a KEYDOWN event matches a global system hotkey.

        Args:
            action: System action name ("quit", "toggle_debug")
            event: pygame event to test
        """
        if event.type != pygame.KEYDOWN:
            return False
        return event.key in self.key_bindings.get("system", {}).get(action, ())

    # ===========================================================
    # Internal Helpers
    # ===========================================================

    def _is_action_pressed(self, action: str, keys) -> bool:
        """Check if any key bound to action is currently pressed."""
        for key in self._active_action_to_keys.get(action, ()):
            if keys[key]:
                return True
        return False

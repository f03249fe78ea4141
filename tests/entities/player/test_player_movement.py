"""
test_player_movement.py
-----------------------
Tests for the pure movement math used by the character controller.

Covers:
- Intent sampling (opposing presses cancel)
- Desired velocity (zero intent, diagonal normalization)
- Facing row selection
- Reactive impulse and spin torque
"""

import pytest
import pygame

from conftest import make_held_input
from pushball.entities.player.player_movement import (
    desired_velocity,
    direction_bucket,
    is_idle,
    reactive_impulse,
    read_move_intent,
    round_half_away,
    signed_angle,
    spin_torque,
)


# ===========================================================
# Intent
# ===========================================================

class TestReadMoveIntent:

    def test_no_input_is_zero(self):
        assert read_move_intent(make_held_input()) == pygame.Vector2(0, 0)

    @pytest.mark.parametrize("held, expected", [
        (("move_right",), (1, 0)),
        (("move_left",), (-1, 0)),
        (("move_up",), (0, -1)),
        (("move_down",), (0, 1)),
        (("move_right", "move_down"), (1, 1)),
    ])
    def test_single_and_combined_actions(self, held, expected):
        assert read_move_intent(make_held_input(*held)) == pygame.Vector2(expected)

    def test_opposing_presses_cancel_per_axis(self):
        """Left+right cancels on x while the vertical press survives."""
        intent = read_move_intent(make_held_input("move_left", "move_right", "move_up"))
        assert intent.x == 0
        assert intent.y == -1

    def test_all_four_cancel(self):
        intent = read_move_intent(make_held_input("move_left", "move_right", "move_up", "move_down"))
        assert intent == pygame.Vector2(0, 0)


# ===========================================================
# Desired Velocity
# ===========================================================

class TestDesiredVelocity:

    def test_zero_intent_gives_exact_zero(self):
        v = desired_velocity(pygame.Vector2(0, 0), 200.0)
        assert v.x == 0 and v.y == 0

    def test_straight_intent_scaled_by_speed(self):
        assert desired_velocity(pygame.Vector2(1, 0), 150.0) == pygame.Vector2(150, 0)

    def test_diagonal_is_not_faster(self):
        v = desired_velocity(pygame.Vector2(1, -1), 200.0)
        assert v.length() == pytest.approx(200.0)
        assert v.x == pytest.approx(-v.y)


# ===========================================================
# Facing
# ===========================================================

class TestDirectionBucket:

    @pytest.mark.parametrize("intent, row", [
        ((0, 1), 0),     # down
        ((-1, 0), 1),    # left
        ((0, -1), 2),    # up
        ((1, 0), 3),     # right
        ((-1, 1), 1),    # down-left rounds away from zero
        ((1, 1), 3),     # down-right wraps to the right row
    ])
    def test_rows(self, intent, row):
        assert direction_bucket(pygame.Vector2(intent)) == row

    def test_row_independent_of_magnitude(self):
        assert direction_bucket(pygame.Vector2(0.001, 0)) == direction_bucket(pygame.Vector2(500, 0))

    def test_bucket_always_in_range(self):
        for deg in range(0, 360, 7):
            v = pygame.Vector2(0, 1).rotate(deg)
            assert 0 <= direction_bucket(v) < 4

    def test_signed_angle_sign(self):
        down = pygame.Vector2(0, 1)
        assert signed_angle(down, pygame.Vector2(-1, 0)) == pytest.approx(1.5707963, rel=1e-6)
        assert signed_angle(down, pygame.Vector2(1, 0)) == pytest.approx(-1.5707963, rel=1e-6)

    @pytest.mark.parametrize("value, expected", [
        (0.49, 0), (0.5, 1), (2.5, 3), (-0.5, -1), (-2.5, -3), (-1.2, -1), (0.0, 0),
    ])
    def test_round_half_away(self, value, expected):
        assert round_half_away(value) == expected


# ===========================================================
# Idle Check
# ===========================================================

class TestIsIdle:

    def test_zero_is_idle(self):
        assert is_idle(pygame.Vector2(0, 0), 1e-3)

    def test_tiny_drift_is_idle(self):
        assert is_idle(pygame.Vector2(1e-4, 0), 1e-3)

    def test_moving_is_not_idle(self):
        assert not is_idle(pygame.Vector2(0, 5), 1e-3)


# ===========================================================
# Impulse & Torque
# ===========================================================

class TestReactiveImpulse:

    def test_impulse_is_negated_normal_times_speed(self):
        normal = pygame.Vector2(-1, 0)          # body is to the right of the character
        velocity = pygame.Vector2(120, 0)
        assert reactive_impulse(normal, velocity) == pygame.Vector2(120, 0)

    def test_uses_speed_not_direction(self):
        impulse = reactive_impulse(pygame.Vector2(0, 1), pygame.Vector2(30, 40))
        assert impulse.x == pytest.approx(0)
        assert impulse.y == pytest.approx(-50)

    def test_zero_velocity_gives_zero_impulse(self):
        assert reactive_impulse(pygame.Vector2(1, 0), pygame.Vector2(0, 0)).length() == 0


class TestSpinTorque:

    def test_sign_follows_horizontal_component(self):
        assert spin_torque(pygame.Vector2(-150, 0), 3.0) == pytest.approx(-450.0)
        assert spin_torque(pygame.Vector2(150, 0), 3.0) == pytest.approx(450.0)

    def test_magnitude_uses_full_impulse_length(self):
        assert spin_torque(pygame.Vector2(30, 40), 2.0) == pytest.approx(100.0)

    def test_purely_vertical_impulse_has_no_spin(self):
        assert spin_torque(pygame.Vector2(0, -80), 4.0) == 0.0

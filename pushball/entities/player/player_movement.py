"""
player_movement.py
------------------
Vector math behind the character controller.

Responsibilities
----------------
- Translate four directional actions into a movement intent.
- Turn the intent into a desired velocity.
- Pick the sprite-sheet row that matches the facing direction.
- Compute the shove applied to reactive bodies the character bumps into.

Everything here is a pure function of its arguments so the controller
stays a thin sequence of calls.
"""

import math

import pygame


# Sprite rows are laid out relative to this direction (row 0 faces down)
REFERENCE_DIRECTION = pygame.Vector2(0, 1)
FULL_TURN = 2 * math.pi


def read_move_intent(input_source) -> pygame.Vector2:
    """
    Build the raw movement intent from held directional actions.

    Each axis ends up in {-1, 0, +1}; opposing presses cancel.

    Args:
        input_source: Object exposing action_held(name) -> bool

    Returns:
        pygame.Vector2: Un-normalized intent (screen space, +y is down)
    """
    intent = pygame.Vector2(0, 0)
    if input_source.action_held("move_right"):
        intent.x += 1
    if input_source.action_held("move_left"):
        intent.x -= 1
    if input_source.action_held("move_down"):
        intent.y += 1
    if input_source.action_held("move_up"):
        intent.y -= 1
    return intent


def desired_velocity(intent: pygame.Vector2, speed: float) -> pygame.Vector2:
    """
    Scale the normalized intent by speed.

    Returns an exact zero vector when there is no intent, so diagonal
    input is never faster than straight input.
    """
    if intent.length_squared() == 0:
        return pygame.Vector2(0, 0)
    return intent.normalize() * speed


def signed_angle(from_vec: pygame.Vector2, to_vec: pygame.Vector2) -> float:
    """Signed angle in radians from from_vec to to_vec, in (-pi, pi]."""
    cross = from_vec.x * to_vec.y - from_vec.y * to_vec.x
    dot = from_vec.x * to_vec.x + from_vec.y * to_vec.y
    return math.atan2(cross, dot)


def round_half_away(value: float) -> int:
    """Round to nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def direction_bucket(intent: pygame.Vector2, directions: int = 4) -> int:
    """
    Map a non-zero intent to a sprite-sheet row.

    With four directions the rows are 0 = down, 1 = left, 2 = up, 3 = right.
    Diagonals sit on bucket boundaries and round away from zero.

    Args:
        intent: Movement intent (must be non-zero)
        directions: Number of facing rows on the sheet

    Returns:
        int: Row index in [0, directions)
    """
    angle = signed_angle(REFERENCE_DIRECTION, intent)
    return round_half_away(directions * angle / FULL_TURN) % directions


def is_idle(velocity: pygame.Vector2, epsilon: float) -> bool:
    """True when velocity is zero within epsilon (px/s)."""
    return velocity.length() <= epsilon


def reactive_impulse(normal: pygame.Vector2, velocity: pygame.Vector2) -> pygame.Vector2:
    """
    Impulse applied to a body the character ran into.

    Args:
        normal: Contact normal pointing from the body toward the character
        velocity: Character velocity after the move

    Returns:
        pygame.Vector2: -normal scaled by the character's speed
    """
    return -normal * velocity.length()


def spin_torque(impulse: pygame.Vector2, factor: float) -> float:
    """
    Rotational kick that accompanies an impulse.

    Magnitude is factor * |impulse|; the sign follows the impulse's
    horizontal direction, and a purely vertical impulse adds no spin.
    """
    if impulse.x == 0:
        return 0.0
    return math.copysign(factor * impulse.length(), impulse.x)

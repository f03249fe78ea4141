"""
test_physics_world.py
---------------------
Tests for PhysicsWorld on a real pymunk space.

Covers:
- Body creation and name/body lookup
- Trigger regions: one entered event per overlap episode, exits, re-entry
- Reactive bodies accept impulses and torque
- clear() empties the space
"""

import pytest
import pygame
import pymunk

from pushball.core.services.event_manager import TriggerEnteredEvent, TriggerExitedEvent
from pushball.systems.physics.physics_objects import CharacterBody, RigidBody, StaticBody

DT = 1 / 60


@pytest.fixture
def recorded(events):
    """Collect trigger events dispatched by the world."""
    log = []
    events.subscribe(TriggerEnteredEvent, log.append)
    events.subscribe(TriggerExitedEvent, log.append)
    return log


class TestObjectCreation:

    def test_wrappers_have_expected_types(self, world):
        ball = world.add_ball("Ball", (100, 100), radius=10)
        pillar = world.add_static_box("Pillar", (200, 200), (20, 20))
        player = world.add_character("Player", (300, 300), radius=12)

        assert isinstance(ball, RigidBody) and ball.is_reactive
        assert isinstance(pillar, StaticBody) and not pillar.is_reactive
        assert isinstance(player, CharacterBody) and not player.is_reactive

    def test_lookup_by_body_and_name(self, world):
        ball = world.add_ball("Ball", (100, 100), radius=10)
        assert world.object_for(ball.body) is ball
        assert world.find("Ball") is ball
        assert world.find("Missing") is None

    def test_walls_are_static_and_named(self, world):
        walls = world.add_walls(400, 300, thickness=10)
        assert len(walls) == 4
        assert all(isinstance(w, StaticBody) and w.name == "Wall" for w in walls)

    def test_character_is_kinematic_and_never_rotates(self, world):
        player = world.add_character("Player", (100, 100), radius=12)
        assert player.body.body_type == pymunk.Body.KINEMATIC
        assert player.body.moment == float("inf")

    def test_rigid_body_cannot_push_character(self, world):
        player = world.add_character("Player", (100, 100), radius=12)
        crate = world.add_box("Crate", (60, 100), (20, 20), mass=5.0)
        crate.body.velocity = (400, 0)

        for _ in range(30):
            world.step(DT)

        assert player.position == pygame.Vector2(100, 100)
        assert player.velocity == pygame.Vector2(0, 0)


class TestTriggerRegions:

    def test_body_inside_region_reports_entry_once(self, world, recorded):
        world.add_trigger_region("Goal", (100, 100, 100, 100))
        world.add_ball("Ball", (150, 150), radius=10)

        world.step(DT)
        world.step(DT)
        world.step(DT)

        entered = [e for e in recorded if isinstance(e, TriggerEnteredEvent)]
        assert entered == [TriggerEnteredEvent(region="Goal", body_name="Ball")]
        assert world.get_trigger("Goal").contains(world.find("Ball"))

    def test_body_outside_region_reports_nothing(self, world, recorded):
        world.add_trigger_region("Goal", (100, 100, 100, 100))
        world.add_ball("Ball", (400, 400), radius=10)

        world.step(DT)

        assert recorded == []

    def test_exit_and_reentry(self, world, recorded):
        world.add_trigger_region("Goal", (100, 100, 100, 100))
        ball = world.add_ball("Ball", (150, 150), radius=10)
        world.step(DT)

        ball.body.position = (400, 400)
        world.step(DT)

        ball.body.position = (150, 150)
        world.step(DT)

        assert recorded == [
            TriggerEnteredEvent(region="Goal", body_name="Ball"),
            TriggerExitedEvent(region="Goal", body_name="Ball"),
            TriggerEnteredEvent(region="Goal", body_name="Ball"),
        ]

    def test_moving_body_rolls_in(self, world, recorded):
        world.add_trigger_region("Goal", (200, 80, 60, 60))
        ball = world.add_ball("Ball", (100, 110), radius=10)
        ball.body.velocity = (300, 0)

        for _ in range(60):
            world.step(DT)

        assert TriggerEnteredEvent(region="Goal", body_name="Ball") in recorded

    def test_regions_do_not_block(self, world):
        world.add_trigger_region("Goal", (100, 0, 50, 200))
        ball = world.add_ball("Ball", (50, 100), radius=10)
        ball.body.velocity = (300, 0)

        for _ in range(60):
            world.step(DT)

        assert ball.position.x > 150

    def test_without_event_manager(self):
        from pushball.systems.physics.physics_world import PhysicsWorld

        world = PhysicsWorld(events=None)
        world.add_trigger_region("Goal", (0, 0, 50, 50))
        world.add_ball("Ball", (25, 25), radius=5)
        world.step(DT)

        assert world.get_trigger("Goal").contains(world.find("Ball"))


class TestImpulses:

    def test_central_impulse_changes_velocity(self, world):
        ball = world.add_ball("Ball", (100, 100), radius=10, mass=2.0)
        ball.apply_central_impulse(pygame.Vector2(100, 0))

        assert ball.velocity.x == pytest.approx(50.0)
        assert ball.velocity.y == pytest.approx(0.0)
        assert ball.angular_velocity == pytest.approx(0.0)

    def test_torque_impulse_spins(self, world):
        ball = world.add_ball("Ball", (100, 100), radius=10, mass=2.0)
        moment = ball.body.moment

        ball.apply_torque_impulse(-300.0)

        assert ball.angular_velocity == pytest.approx(-300.0 / moment)

        world.step(1 / 60)
        assert ball.rotation < 0


class TestLifecycle:

    def test_clear_empties_space(self, world):
        world.add_walls(200, 200)
        world.add_ball("Ball", (100, 100), radius=10)
        world.add_trigger_region("Goal", (10, 10, 30, 30))

        world.clear()

        assert world.space.shapes == []
        assert world.space.bodies == []
        assert world.objects == []
        assert world.get_trigger("Goal") is None

"""The player ship, its keyboard controls and the spawned scene."""

from __future__ import annotations

import enum
from collections.abc import Container
from dataclasses import dataclass, field

from .acceleration import InstantAcceleration, InstantAngularAcceleration
from .geometry import Transform, Vec2, Vec3
from .velocity import InstantAngularVelocity, InstantVelocity

PLAYER_SPRITE = "sprites/Ships/ship-a/ship-a2.png"
SPRITE_SIZE = Vec2(128.0, 128.0)
DUMMY_POSITION = Vec3(50.0, 50.0, 0.0)


class Key(enum.Enum):
    """Keys that steer the player."""

    Q = "q"
    E = "e"
    W = "w"
    S = "s"
    A = "a"
    D = "d"


@dataclass
class Player:
    """The player's ship."""

    image: str = PLAYER_SPRITE
    transform: Transform = field(default_factory=Transform)
    angular_velocity: InstantAngularVelocity = field(
        default_factory=InstantAngularVelocity
    )
    size: Vec2 = SPRITE_SIZE


@dataclass
class Dummy:
    """A stationary object placed next to the player."""

    image: str = PLAYER_SPRITE
    transform: Transform = field(
        default_factory=lambda: Transform.from_translation(DUMMY_POSITION)
    )
    size: Vec2 = SPRITE_SIZE


def _axis(positive: bool, negative: bool) -> float:
    if positive and not negative:
        return 1.0
    if negative and not positive:
        return -1.0
    return 0.0


def linear_input(pressed: Container[Key]) -> Vec2:
    """Direction requested by Q/E (sideways) and W/S (forwards)."""
    sideways = _axis(Key.E in pressed, Key.Q in pressed)
    forwards = _axis(Key.W in pressed, Key.S in pressed)
    return Vec2(sideways, forwards)


def rotary_input(pressed: Container[Key]) -> float:
    """Turn requested by A (counter-clockwise) and D (clockwise)."""
    return _axis(Key.A in pressed, Key.D in pressed)


def _movement(pressed: Container[Key], transform: Transform, delta_secs: float) -> Vec2 | None:
    momentum = linear_input(pressed)
    if momentum == Vec2.ZERO:
        return None
    rotated = transform.rotation.mul_vec3(momentum.extend(0.0)).truncate()
    return rotated * delta_secs


def apply_velocity_from_keyboard(
    pressed: Container[Key],
    transform: Transform,
    velocity: InstantVelocity,
    delta_secs: float,
) -> None:
    """Add keyboard movement, relative to the ship's heading, to ``velocity``."""
    movement = _movement(pressed, transform, delta_secs)
    if movement is not None:
        velocity.value = velocity.value + movement


def apply_acceleration_from_keyboard(
    pressed: Container[Key],
    transform: Transform,
    acceleration: InstantAcceleration,
    delta_secs: float,
) -> None:
    """Add keyboard movement, relative to the ship's heading, to ``acceleration``."""
    movement = _movement(pressed, transform, delta_secs)
    if movement is not None:
        acceleration.value = acceleration.value + movement


def apply_angular_acceleration_from_keyboard(
    pressed: Container[Key],
    acceleration: InstantAngularAcceleration,
    delta_secs: float,
) -> None:
    """Add the keyboard turn over ``delta_secs`` to ``acceleration``."""
    acceleration.value = acceleration.value + rotary_input(pressed) * delta_secs


def apply_angular_velocity_from_keyboard(
    pressed: Container[Key],
    velocity: InstantAngularVelocity,
    delta_secs: float,
) -> None:
    """Add the keyboard turn over ``delta_secs`` to ``velocity``."""
    velocity.value = velocity.value + rotary_input(pressed) * delta_secs


def spawn_player(asset_path: str = PLAYER_SPRITE) -> tuple[Player, Dummy]:
    """Create the player and a dummy object, both drawn with ``asset_path``."""
    return Player(image=asset_path), Dummy(image=asset_path)
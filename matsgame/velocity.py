"""Linear and angular velocities and their application to transforms."""

from __future__ import annotations

import dataclasses
from typing import Any

from .geometry import Quat, Transform, Vec2
from .quantities import ScalarQuantity, VectorQuantity


class InstantVelocity(VectorQuantity, additive=True):
    """Velocity that is used up when applied."""

    def consume(self) -> Vec2:
        """Return the velocity and reset it to zero."""
        output = self.value
        self.value = Vec2.ZERO
        return output

    def apply_to(self, transform: Transform) -> Transform:
        """Move ``transform`` by the velocity, consuming it."""
        transform.translation = transform.translation + self.consume().extend(0.0)
        return transform

    def __radd__(self, other: object) -> Any:
        if isinstance(other, Transform):
            moved = dataclasses.replace(other)
            return self.apply_to(moved)
        return super().__radd__(other)


class MaintainedVelocity(VectorQuantity, additive=True):
    """Velocity that persists between applications."""

    def apply_to(self, transform: Transform) -> Transform:
        """Move ``transform`` by the velocity, leaving the velocity intact."""
        transform.translation = transform.translation + self.value.extend(0.0)
        return transform

    def __radd__(self, other: object) -> Any:
        if isinstance(other, Transform):
            moved = dataclasses.replace(other)
            return self.apply_to(moved)
        return super().__radd__(other)


class InstantAngularVelocity(ScalarQuantity, arithmetic=True, additive=True):
    """Angular velocity that is used up when applied."""

    def consume(self) -> float:
        """Return the angular velocity and reset it to zero."""
        output = self.value
        self.value = 0.0
        return output


class MaintainedAngularVelocity(ScalarQuantity, arithmetic=True, additive=True):
    """Angular velocity that persists between applications."""

    def consume(self) -> float:
        """Return the angular velocity and reset it to zero."""
        output = self.value
        self.value = 0.0
        return output


def apply_instant_velocity(transform: Transform, velocity: InstantVelocity) -> None:
    """Move ``transform`` by ``velocity`` and reset the velocity."""
    velocity.apply_to(transform)


def apply_maintained_velocity(
    transform: Transform, velocity: MaintainedVelocity
) -> None:
    """Move ``transform`` by ``velocity``."""
    velocity.apply_to(transform)


def apply_instant_angular_velocity(
    transform: Transform,
    angular_velocity: InstantAngularVelocity,
    delta_secs: float,
) -> None:
    """Rotate ``transform`` about z by the velocity over ``delta_secs``."""
    delta_angle = angular_velocity.consume() * delta_secs
    transform.rotation = transform.rotation * Quat.from_rotation_z(delta_angle)
"""Linear and angular accelerations and their application to velocities."""

from __future__ import annotations

from .geometry import Vec2
from .quantities import ScalarQuantity, VectorQuantity
from .velocity import MaintainedAngularVelocity, MaintainedVelocity


class InstantAcceleration(VectorQuantity, adds_to=(MaintainedVelocity,)):
    """Linear acceleration gathered during a tick.

    Adding it to a :class:`MaintainedVelocity` yields a maintained velocity.
    """

    def consume(self) -> Vec2:
        """Return the acceleration and reset it to zero."""
        output = self.value
        self.value = Vec2.ZERO
        return output

    def limit(self, limit: float) -> None:
        """Scale the acceleration down so its length does not exceed ``limit``."""
        if self.value.length() > limit:
            if self.value == Vec2.ZERO:
                return
            self.value = self.value.normalize() * limit

    def clear(self) -> None:
        """Reset the acceleration to zero."""
        self.value = Vec2.ZERO


class InstantAngularAcceleration(
    ScalarQuantity,
    arithmetic=True,
    additive=True,
    adds_to=(MaintainedAngularVelocity,),
):
    """Angular acceleration gathered during a tick.

    Adding it to a :class:`MaintainedAngularVelocity` yields a maintained
    angular velocity.
    """

    def consume(self) -> float:
        """Return the acceleration and reset it to zero."""
        output = self.value
        self.value = 0.0
        return output

    def limit(self, limit: float) -> None:
        """Cap the acceleration at ``limit`` from above."""
        if self.value > limit:
            self.value = float(limit)

    def clear(self) -> None:
        """Reset the acceleration to zero."""
        self.value = 0.0


def apply_angular_acceleration(
    velocity: MaintainedAngularVelocity,
    acceleration: InstantAngularAcceleration,
    delta_secs: float,
) -> None:
    """Add ``acceleration`` over ``delta_secs`` to ``velocity`` and clear it."""
    acceleration.value = acceleration.value * delta_secs
    velocity.value = (velocity + acceleration).value
    acceleration.clear()


def apply_linear_acceleration(
    velocity: MaintainedVelocity,
    acceleration: InstantAcceleration,
    delta_secs: float,
) -> None:
    """Add ``acceleration`` over ``delta_secs`` to ``velocity`` and clear it."""
    acceleration.value = acceleration.value * delta_secs
    velocity.value = (velocity + acceleration).value
    acceleration.clear()
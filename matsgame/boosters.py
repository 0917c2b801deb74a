"""Multipliers that boost instant velocities and accelerations."""

from __future__ import annotations

from .acceleration import InstantAcceleration
from .quantities import ScalarQuantity
from .velocity import InstantVelocity


class InstantVelocityBooster(ScalarQuantity, scales=(InstantVelocity,)):
    """Factor by which an :class:`InstantVelocity` may be multiplied."""


class InstantAccelerationBooster(ScalarQuantity, scales=(InstantAcceleration,)):
    """Factor by which an :class:`InstantAcceleration` may be multiplied."""
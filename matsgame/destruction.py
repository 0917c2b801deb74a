"""Health, damage and healing values."""

from __future__ import annotations

from typing import Any

from .quantities import ScalarQuantity


class MaxHealth(ScalarQuantity, default=100.0):
    """Upper bound for an object's current health."""


class Damage(ScalarQuantity, additive=True):
    """An amount of damage; adds to other damage."""

    def consume(self) -> float:
        """Return the raw damage amount."""
        return self.value


class Healing(ScalarQuantity, additive=True):
    """An amount of healing; adds to other healing."""


class CurrentHealth(ScalarQuantity, default=100.0):
    """Health an object has right now.

    Adding :class:`Healing` raises it and adding :class:`Damage` lowers it.
    """

    def limit(self, upper_bound: MaxHealth) -> None:
        """Clamp the value so it does not exceed ``upper_bound``."""
        self.value = min(self.value, float(upper_bound))

    def __add__(self, other: object) -> Any:
        if isinstance(other, Healing):
            return CurrentHealth(self.value + other.value)
        if isinstance(other, Damage):
            return CurrentHealth(self.value - other.consume())
        return NotImplemented


class Health:
    """Maximum and current health of a destructible object."""

    __slots__ = ("max_health", "current_health")

    def __init__(self, health: float = 100.0) -> None:
        self.max_health = MaxHealth(health)
        self.current_health = CurrentHealth(health)

    @classmethod
    def injured(cls, max_health: float, current_health: float) -> Health:
        """Health whose current value differs from its maximum."""
        result = cls(max_health)
        result.current_health = CurrentHealth(current_health)
        return result

    def is_alive(self) -> bool:
        """True unless current health is exactly zero."""
        return self.current_health != CurrentHealth(0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Health):
            return NotImplemented
        return (
            self.max_health == other.max_health
            and self.current_health == other.current_health
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Health(max_health={self.max_health!r}, "
            f"current_health={self.current_health!r})"
        )

    def _copy(self) -> Health:
        return Health.injured(float(self.max_health), float(self.current_health))

    def __add__(self, other: object) -> Any:
        if isinstance(other, Healing):
            result = self._copy()
            result.current_health = result.current_health + other
            result.current_health.limit(result.max_health)
            return result
        if isinstance(other, Damage):
            result = self._copy()
            result.current_health = result.current_health + other
            return result
        return NotImplemented

    def __iadd__(self, other: object) -> Any:
        # In-place healing is deliberately not clamped to the maximum.
        if isinstance(other, (Healing, Damage)):
            self.current_health = self.current_health + other
            return self
        return NotImplemented
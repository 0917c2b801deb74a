"""Named numeric wrappers: distinct types over a float or a Vec2.

Subclasses opt into the operations they support with class keywords:

* ``arithmetic`` (scalars): ``+``, ``-`` and ``*`` with plain numbers.
* ``additive``: ``+`` between two values of the same type.
* ``adds_to``: types this one may be added onto; the result keeps the
  left-hand type.
* ``scales`` (scalars): types this one may multiply; the result keeps the
  left-hand type.
* ``default``: value used when none is given.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, ClassVar

from .geometry import Vec2


class ScalarQuantity:
    """A float carried under its own type name."""

    __slots__ = ("value",)

    _default: ClassVar[float] = 0.0
    _arithmetic: ClassVar[bool] = False
    _additive: ClassVar[bool] = False
    _adds_to: ClassVar[tuple[type, ...]] = ()
    _scales: ClassVar[tuple[type, ...]] = ()

    def __init_subclass__(
        cls,
        *,
        default: float = 0.0,
        arithmetic: bool = False,
        additive: bool = False,
        adds_to: tuple[type, ...] = (),
        scales: tuple[type, ...] = (),
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls._default = float(default)
        cls._arithmetic = arithmetic
        cls._additive = additive
        cls._adds_to = tuple(adds_to)
        cls._scales = tuple(scales)

    def __init__(self, value: float | None = None) -> None:
        self.value = float(self._default if value is None else value)

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value == other.value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value < other.value
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value >= other.value
        return NotImplemented

    def __add__(self, other: object) -> Any:
        if self._arithmetic and isinstance(other, Real):
            return type(self)(self.value + float(other))
        if self._additive and type(other) is type(self):
            return type(self)(self.value + other.value)
        return NotImplemented

    def __radd__(self, other: object) -> Any:
        if self._adds_to and isinstance(other, self._adds_to):
            return type(other)(other.value + self.value)
        return NotImplemented

    def __sub__(self, other: object) -> Any:
        if self._arithmetic and isinstance(other, Real):
            return type(self)(self.value - float(other))
        return NotImplemented

    def __mul__(self, other: object) -> Any:
        if self._arithmetic and isinstance(other, Real):
            return type(self)(self.value * float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Any:
        if self._scales and isinstance(other, self._scales):
            return type(other)(other.value * self.value)
        return NotImplemented


class VectorQuantity:
    """A Vec2 carried under its own type name.

    Supports ``+`` and ``-`` with a Vec2, and ``*`` with a Vec2 or a number.
    """

    __slots__ = ("value",)

    _additive: ClassVar[bool] = False
    _adds_to: ClassVar[tuple[type, ...]] = ()

    def __init_subclass__(
        cls,
        *,
        additive: bool = False,
        adds_to: tuple[type, ...] = (),
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls._additive = additive
        cls._adds_to = tuple(adds_to)

    def __init__(self, value: Vec2 | None = None) -> None:
        if value is None:
            value = Vec2.ZERO
        if not isinstance(value, Vec2):
            raise TypeError(f"expected a Vec2, got {type(value).__name__}")
        self.value = value

    @property
    def x(self) -> float:
        return self.value.x

    @property
    def y(self) -> float:
        return self.value.y

    def length(self) -> float:
        """Length of the wrapped vector."""
        return self.value.length()

    def __iter__(self):
        return iter(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.value == other.value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> Any:
        if isinstance(other, Vec2):
            return type(self)(self.value + other)
        if self._additive and type(other) is type(self):
            return type(self)(self.value + other.value)
        return NotImplemented

    def __radd__(self, other: object) -> Any:
        if self._adds_to and isinstance(other, self._adds_to):
            return type(other)(other.value + self.value)
        return NotImplemented

    def __sub__(self, other: object) -> Any:
        if isinstance(other, Vec2):
            return type(self)(self.value - other)
        return NotImplemented

    def __mul__(self, other: object) -> Any:
        if isinstance(other, (Vec2, Real)):
            return type(self)(self.value * other)
        return NotImplemented
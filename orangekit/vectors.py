"""Small mutable 2, 3 and 4 component float vectors."""

from __future__ import annotations

from typing import Iterator

__all__ = ["Vec2", "Vec3", "Vec4"]


class _Vector:
    """Equality and representation shared by the vector types."""

    __slots__ = ()
    _fields: tuple[str, ...] = ()

    def _components(self) -> tuple[float, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def _axis(self, index: int) -> float:
        if not 0 <= index < len(self._fields):
            raise IndexError(f"{type(self).__name__} has no axis {index}")
        return getattr(self, self._fields[index])

    def _combine(self, other, op):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(op(a, b) for a, b in zip(self._components(), other._components())))

    def _scale(self, scalar, op):
        if isinstance(scalar, _Vector):
            return NotImplemented
        return type(self)(*(op(a, scalar) for a in self._components()))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._components() == other._components()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({parts})"


def _add(a: float, b: float) -> float:
    return a + b


def _sub(a: float, b: float) -> float:
    return a - b


def _mul(a: float, b: float) -> float:
    return a * b


def _div(a: float, b: float) -> float:
    return a / b


class Vec2(_Vector):
    """A two component vector; ``Vec2(v)`` fills both axes with ``v``."""

    __slots__ = ("x", "y")
    _fields = ("x", "y")

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        self.x = float(x)
        self.y = float(x if y is None else y)

    def __add__(self, other):
        return self._combine(other, _add)

    def __sub__(self, other):
        return self._combine(other, _sub)

    def __mul__(self, scalar):
        return self._scale(scalar, _mul)

    def __truediv__(self, scalar):
        return self._scale(scalar, _div)

    def __getitem__(self, index: int) -> float:
        return self._axis(index)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components())


class Vec3(_Vector):
    """A three component vector; ``Vec3(v)`` fills every axis with ``v``."""

    __slots__ = ("x", "y", "z")
    _fields = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float | None = None, z: float | None = None) -> None:
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("Vec3 takes one value or all three")
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other):
        return self._combine(other, _add)

    def __sub__(self, other):
        return self._combine(other, _sub)

    def __mul__(self, scalar):
        return self._scale(scalar, _mul)

    def __getitem__(self, index: int) -> float:
        return self._axis(index)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components())


class Vec4(_Vector):
    """A four component vector; ``Vec4(v)`` fills every axis with ``v``."""

    __slots__ = ("x", "y", "z", "w")
    _fields = ("x", "y", "z", "w")

    def __init__(
        self,
        x: float = 0.0,
        y: float | None = None,
        z: float | None = None,
        w: float | None = None,
    ) -> None:
        rest = (y, z, w)
        if all(v is None for v in rest):
            y = z = w = x
        elif any(v is None for v in rest):
            raise TypeError("Vec4 takes one value or all four")
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def __add__(self, other):
        return self._combine(other, _add)

    def __sub__(self, other):
        return self._combine(other, _sub)

    def __mul__(self, scalar):
        return self._scale(scalar, _mul)

    def __truediv__(self, scalar):
        return self._scale(scalar, _div)

    def __imul__(self, scalar: float) -> Vec4:
        # In-place scaling leaves w alone, unlike ``*``.
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __getitem__(self, index: int) -> float:
        return self._axis(index)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components())
"""A random 64-bit identifier."""

from __future__ import annotations

import secrets

_MAX = 1 << 64


class UUID:
    """An unsigned 64-bit identifier, random unless a value is given."""

    __slots__ = ("_value",)

    def __init__(self, value: int | None = None) -> None:
        if value is None:
            value = secrets.randbits(64)
        elif isinstance(value, UUID):
            value = value._value
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"UUID value must be an int, not {type(value).__name__}")
        if not 0 <= value < _MAX:
            raise ValueError(f"UUID value {value} is outside the unsigned 64-bit range")
        self._value = value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UUID):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"UUID({self._value})"
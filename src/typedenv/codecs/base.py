"""StringCodec — the contract every environment-convertible type meets.

A codec is a ``parse``/``format`` pair between a typed value and the raw
string stored in the process environment.

INVARIANT: ``codec.parse(codec.format(v)) == v`` for every value the codec
can produce. The reverse is not guaranteed (``"+5"`` parses to ``5``,
which formats back as ``"5"``).

INVARIANT: ``parse`` never raises for malformed input. ``None`` is the
only failure signal.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class StringCodec(Protocol[T]):
    """Two-way mapping between ``T`` and its environment string."""

    def parse(self, raw: str) -> T | None:
        """Return the value encoded by *raw*, or None if *raw* is invalid."""
        ...

    def format(self, value: T) -> str:
        """Return the environment string for *value*."""
        ...


def is_codec(obj: object) -> bool:
    """Check whether *obj* is a codec instance (not a class that looks like one)."""
    return not isinstance(obj, type) and isinstance(obj, StringCodec)


class NoCodecError(TypeError):
    """Raised when a type hint or value has no string codec."""


class TypeExpressionError(ValueError):
    """Raised when a textual type expression (``list[int]``) is malformed."""

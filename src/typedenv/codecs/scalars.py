"""Codecs for primitive scalars: integers, floats, booleans, and strings.

Parsing accepts exactly the canonical literal of the target type. No
surrounding whitespace, no ``_`` digit separators, no non-ASCII digits,
no locale grouping. Python's own ``int()``/``float()`` are more lenient
than that, so the literal grammar is checked first.
"""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

# Enough significant digits to round-trip any binary32 value.
_FLOAT32_MAX_DIGITS = 9

# Smallest magnitude that rounds to infinity in binary32.
_FLOAT32_OVERFLOW = 2.0**128 - 2.0**103


@dataclass(frozen=True)
class IntegerCodec:
    """Decimal integer literals, optionally bounded to a fixed width.

    Attributes:
        bits: Width of the integer type, or None for Python's unbounded ``int``.
        signed: Whether negative values are representable.
    """

    bits: int | None = None
    signed: bool = True

    @property
    def min_value(self) -> int | None:
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int | None:
        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def parse(self, raw: str) -> int | None:
        if _INT_LITERAL.fullmatch(raw) is None:
            return None
        try:
            value = int(raw)
        except ValueError:
            # Literal longer than the interpreter's int digit limit.
            return None
        lo, hi = self.min_value, self.max_value
        if lo is not None and value < lo:
            return None
        if hi is not None and value > hi:
            return None
        return value

    def format(self, value: int) -> str:
        """Encode *value* in decimal.

        Raises:
            TypeError: If *value* is not an ``int``. Floats are never truncated.
        """
        if not isinstance(value, int):
            msg = f"Expected int, got {type(value).__name__}: {value!r}"
            raise TypeError(msg)
        return str(int(value))


@dataclass(frozen=True)
class FloatCodec:
    """Float literals; ``repr`` gives the shortest round-trippable form.

    With ``single=True`` values are rounded through IEEE binary32 and
    formatted with the fewest digits that survive that rounding. Finite
    literals beyond the binary32 range fail to parse.
    """

    single: bool = False

    def parse(self, raw: str) -> float | None:
        if _FLOAT_LITERAL.fullmatch(raw) is None:
            return None
        value = float(raw)
        if not self.single:
            return value
        if _overflows_float32(value):
            return None
        return _to_float32(value)

    def format(self, value: float) -> str:
        if not self.single:
            return repr(float(value))
        if _overflows_float32(value):
            return repr(math.copysign(math.inf, value))
        target = _to_float32(value)
        for digits in range(1, _FLOAT32_MAX_DIGITS + 1):
            candidate = float(f"{target:.{digits}g}")
            if _to_float32(candidate) == target:
                return repr(candidate)
        return repr(target)


def _overflows_float32(value: float) -> bool:
    return not math.isinf(value) and abs(value) >= _FLOAT32_OVERFLOW


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class BoolCodec:
    """Exactly ``true`` or ``false``."""

    _LITERALS = {"true": True, "false": False}

    def parse(self, raw: str) -> bool | None:
        return self._LITERALS.get(raw)

    def format(self, value: bool) -> str:
        return "true" if value else "false"

    def __repr__(self) -> str:
        return "BoolCodec()"


class TextCodec:
    """Identity codec for ``str``."""

    def parse(self, raw: str) -> str:
        return raw

    def format(self, value: str) -> str:
        return value

    def __repr__(self) -> str:
        return "TextCodec()"


STR = TextCodec()
BOOL = BoolCodec()

INT = IntegerCodec()
INT8 = IntegerCodec(bits=8)
INT16 = IntegerCodec(bits=16)
INT32 = IntegerCodec(bits=32)
INT64 = IntegerCodec(bits=64)
UINT8 = IntegerCodec(bits=8, signed=False)
UINT16 = IntegerCodec(bits=16, signed=False)
UINT32 = IntegerCodec(bits=32, signed=False)
UINT64 = IntegerCodec(bits=64, signed=False)

FLOAT = FloatCodec()
FLOAT32 = FloatCodec(single=True)

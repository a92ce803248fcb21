"""Codecs derived from a type's own string handling.

Two derivation rules:

- Self-describing types already have a lossless string form and a
  matching constructor (UUID, URL, Decimal, Path). Their codec delegates
  to both and fails exactly when the constructor does.
- Enumeration types backed by a raw value parse that value with the
  value's own codec, then look up the member.

A type can opt out of both by defining ``from_env_string`` (classmethod)
and ``to_env_string``; :class:`CustomCodec` calls those instead.
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from typedenv.codecs.base import StringCodec


@dataclass(frozen=True)
class LosslessCodec:
    """Delegate to ``cls(raw)`` and ``str(value)``.

    Attributes:
        cls: The self-describing type.
        errors: Exceptions the constructor raises for malformed input.
    """

    cls: type[Any]
    errors: tuple[type[Exception], ...] = (ValueError, TypeError)

    def parse(self, raw: str) -> Any | None:
        try:
            return self.cls(raw)
        except self.errors:
            return None

    def format(self, value: Any) -> str:
        return str(value)


def lossless_codec(cls: type[Any], *errors: type[Exception]) -> LosslessCodec:
    """Build a codec for a class whose ``str()`` round-trips through its constructor."""
    if errors:
        return LosslessCodec(cls, errors)
    return LosslessCodec(cls)


class CharCodec:
    """A single Unicode scalar."""

    def parse(self, raw: str) -> str | None:
        return raw if len(raw) == 1 else None

    def format(self, value: str) -> str:
        return value

    def __repr__(self) -> str:
        return "CharCodec()"


class DecimalCodec:
    """Extended-precision decimals via :class:`decimal.Decimal`.

    ``Decimal()`` tolerates surrounding whitespace and ``_`` separators;
    both are rejected here to keep the literal grammar exact.
    """

    def parse(self, raw: str) -> decimal.Decimal | None:
        if raw != raw.strip() or "_" in raw:
            return None
        try:
            return decimal.Decimal(raw)
        except decimal.InvalidOperation:
            return None

    def format(self, value: decimal.Decimal) -> str:
        return str(value)

    def __repr__(self) -> str:
        return "DecimalCodec()"


class BytesCodec:
    """UTF-8 bytes of the raw text.

    Uses ``surrogateescape`` like ``os.environ`` does, so bytes that are
    not valid UTF-8 still survive a format/parse round-trip.
    """

    def parse(self, raw: str) -> bytes:
        return raw.encode("utf-8", "surrogateescape")

    def format(self, value: bytes) -> str:
        return bytes(value).decode("utf-8", "surrogateescape")

    def __repr__(self) -> str:
        return "BytesCodec()"


@dataclass(frozen=True)
class UrlCodec:
    """URLs validated by pydantic (``AnyUrl`` or a subclass such as ``HttpUrl``)."""

    url_type: type[AnyUrl] = AnyUrl
    _adapter: TypeAdapter[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", TypeAdapter(self.url_type))

    def parse(self, raw: str) -> AnyUrl | None:
        try:
            return self._adapter.validate_python(raw)
        except ValidationError:
            return None

    def format(self, value: AnyUrl) -> str:
        return str(value)


@dataclass(frozen=True)
class EnumCodec:
    """Members of an :class:`~enum.Enum`, encoded by their value.

    Only declared members parse. Flag combinations that the class does not
    name (``R|W``, an empty flag) are rejected.

    Attributes:
        enum_cls: The enumeration.
        value_codec: Codec for the members' value type.
    """

    enum_cls: type[Enum]
    value_codec: StringCodec[Any]

    def parse(self, raw: str) -> Enum | None:
        value = self.value_codec.parse(raw)
        if value is None:
            return None
        try:
            member = self.enum_cls(value)
        except ValueError:
            return None
        return member if self._is_declared(member) else None

    def format(self, value: Any) -> str:
        """Encode a member, or a raw value that names one.

        Raises:
            ValueError: If *value* is not a declared member of the enum.
        """
        member = value if isinstance(value, self.enum_cls) else self.enum_cls(value)
        if not self._is_declared(member):
            msg = f"{value!r} is not a declared member of {self.enum_cls.__qualname__}"
            raise ValueError(msg)
        return self.value_codec.format(member.value)

    def _is_declared(self, member: Enum) -> bool:
        return any(member is declared for declared in self.enum_cls.__members__.values())


@dataclass(frozen=True)
class CustomCodec:
    """Codec for a class defining its own ``from_env_string``/``to_env_string``."""

    cls: type[Any]

    def parse(self, raw: str) -> Any | None:
        return self.cls.from_env_string(raw)

    def format(self, value: Any) -> str:
        return value.to_env_string()


def has_custom_hooks(cls: type[Any]) -> bool:
    """Check whether *cls* supplies its own environment string conversion."""
    return callable(getattr(cls, "from_env_string", None)) and callable(
        getattr(cls, "to_env_string", None)
    )


CHAR = CharCodec()
DECIMAL = DecimalCodec()
BYTES = BytesCodec()
URL = UrlCodec()

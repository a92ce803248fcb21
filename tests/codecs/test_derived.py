"""Tests for self-describing, enum, and custom codecs."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum, Flag, IntEnum, IntFlag, StrEnum
from pathlib import Path
from uuid import UUID

import pytest
from pydantic import AnyUrl, HttpUrl

from typedenv.codecs.derived import (
    BYTES,
    CHAR,
    DECIMAL,
    URL,
    CustomCodec,
    EnumCodec,
    LosslessCodec,
    UrlCodec,
    has_custom_hooks,
    lossless_codec,
)
from typedenv.codecs.scalars import INT, STR


class Level(IntEnum):
    ONE = 1
    TWO = 2


class Mode(StrEnum):
    FAST = "fast"
    SAFE = "safe"


class Perm(Flag):
    R = 1
    W = 2


class Access(IntFlag):
    NONE = 0
    READ = 1
    WRITE = 2
    BOTH = 3


class Named(Enum):
    """Encoded by member name rather than by value."""

    ONE = 1
    TWO = 2

    @classmethod
    def from_env_string(cls, raw: str) -> Named | None:
        return cls.__members__.get(raw.upper())

    def to_env_string(self) -> str:
        return self.name.lower()


class TestCharCodec:
    def test_single_scalar(self) -> None:
        assert CHAR.parse("x") == "x"
        assert CHAR.parse("é") == "é"

    @pytest.mark.parametrize("raw", ["", "ab"])
    def test_rejects_other_lengths(self, raw: str) -> None:
        assert CHAR.parse(raw) is None


class TestLosslessCodec:
    def test_uuid(self) -> None:
        codec = lossless_codec(UUID)
        value = codec.parse("E621E1F8-C36C-495A-93FC-0C247A3E6E5F")
        assert value == UUID("e621e1f8-c36c-495a-93fc-0c247a3e6e5f")
        assert codec.format(value) == "e621e1f8-c36c-495a-93fc-0c247a3e6e5f"

    def test_uuid_malformed(self) -> None:
        assert lossless_codec(UUID).parse("not-a-uuid") is None

    def test_path_round_trip(self) -> None:
        codec = lossless_codec(Path)
        value = Path("/etc/app/config.toml")
        assert codec.parse(codec.format(value)) == value

    def test_custom_error_types(self) -> None:
        codec = lossless_codec(Decimal, ArithmeticError)
        assert isinstance(codec, LosslessCodec)
        assert codec.errors == (ArithmeticError,)
        assert codec.parse("bogus") is None


class TestDecimalCodec:
    def test_preserves_precision(self) -> None:
        value = DECIMAL.parse("3.14159265358979323846264338327950288")
        assert value == Decimal("3.14159265358979323846264338327950288")
        assert DECIMAL.format(value) == "3.14159265358979323846264338327950288"

    @pytest.mark.parametrize("raw", ["", " 1.5", "1.5 ", "1_000", "abc"])
    def test_rejects_non_literals(self, raw: str) -> None:
        assert DECIMAL.parse(raw) is None


class TestBytesCodec:
    def test_utf8(self) -> None:
        assert BYTES.parse("hello") == b"hello"
        assert BYTES.format(b"hello") == "hello"

    def test_undecodable_bytes_round_trip(self) -> None:
        value = b"\xff\xfe"
        assert BYTES.parse(BYTES.format(value)) == value


class TestUrlCodec:
    def test_parses_url(self) -> None:
        value = URL.parse("https://example.com")
        assert isinstance(value, AnyUrl)
        assert value.host == "example.com"

    def test_round_trip(self) -> None:
        value = URL.parse("https://example.com/path?q=1")
        assert value is not None
        assert URL.parse(URL.format(value)) == value

    @pytest.mark.parametrize("raw", ["", "not a url", "://missing-scheme"])
    def test_malformed(self, raw: str) -> None:
        assert URL.parse(raw) is None

    def test_narrower_url_type(self) -> None:
        codec = UrlCodec(HttpUrl)
        assert codec.parse("ftp://example.com") is None
        assert codec.parse("http://example.com") is not None


class TestEnumCodec:
    def test_int_backed(self) -> None:
        codec = EnumCodec(Level, INT)
        assert codec.parse("2") is Level.TWO
        assert codec.format(Level.ONE) == "1"

    def test_unknown_value_fails(self) -> None:
        assert EnumCodec(Level, INT).parse("3") is None

    def test_raw_value_parse_failure_fails(self) -> None:
        assert EnumCodec(Level, INT).parse("two") is None

    def test_str_backed(self) -> None:
        codec = EnumCodec(Mode, STR)
        assert codec.parse("safe") is Mode.SAFE
        assert codec.parse("SAFE") is None
        assert codec.format(Mode.FAST) == "fast"

    def test_format_accepts_raw_value_of_member(self) -> None:
        assert EnumCodec(Level, INT).format(2) == "2"
        assert EnumCodec(Mode, STR).format("safe") == "safe"

    def test_format_rejects_unknown_raw_value(self) -> None:
        with pytest.raises(ValueError):
            EnumCodec(Level, INT).format(3)


class TestFlagEnumCodec:
    def test_declared_members_parse(self) -> None:
        codec = EnumCodec(Perm, INT)
        assert codec.parse("1") is Perm.R
        assert codec.parse("2") is Perm.W

    @pytest.mark.parametrize("raw", ["0", "3", "4"])
    def test_undeclared_combinations_fail(self, raw: str) -> None:
        assert EnumCodec(Perm, INT).parse(raw) is None

    def test_int_flag_pseudo_members_fail(self) -> None:
        codec = EnumCodec(Access, INT)
        assert codec.parse("8") is None
        assert codec.parse("5") is None

    def test_int_flag_declared_combinations_parse(self) -> None:
        codec = EnumCodec(Access, INT)
        assert codec.parse("0") is Access.NONE
        assert codec.parse("3") is Access.BOTH

    def test_format_rejects_undeclared_combination(self) -> None:
        with pytest.raises(ValueError):
            EnumCodec(Perm, INT).format(Perm.R | Perm.W)


class TestCustomCodec:
    def test_detects_hooks(self) -> None:
        assert has_custom_hooks(Named)
        assert not has_custom_hooks(Level)

    def test_uses_class_hooks(self) -> None:
        codec = CustomCodec(Named)
        assert codec.parse("two") is Named.TWO
        assert codec.parse("2") is None
        assert codec.format(Named.ONE) == "one"

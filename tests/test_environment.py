"""Tests for the Environment accessor."""

from __future__ import annotations

import logging
import os
from enum import IntEnum, StrEnum
from uuid import UUID

import pytest
from pydantic import AnyUrl

from typedenv.codecs import UINT8, NoCodecError
from typedenv.environment import Environment, environment


class Level(IntEnum):
    ONE = 1
    TWO = 2


class Mode(StrEnum):
    ONE = "one"
    TWO = "two"


class TestRawAccess:
    def test_set_and_get(self, env: Environment, store: dict[str, str]) -> None:
        env.set_raw("HOST", "example.com")
        assert env.raw("HOST") == "example.com"
        assert store == {"HOST": "example.com"}

    def test_missing_is_none(self, env: Environment) -> None:
        assert env.raw("MISSING") is None

    def test_set_none_unsets(self, env: Environment, store: dict[str, str]) -> None:
        env.set_raw("HOST", "example.com")
        env.set_raw("HOST", None)
        assert "HOST" not in store
        assert env.raw("HOST") is None

    def test_unset_missing_is_noop(self, env: Environment) -> None:
        env.unset("MISSING")
        assert "MISSING" not in env

    def test_contains(self, env: Environment) -> None:
        env.set_raw("EMPTY", "")
        assert "EMPTY" in env
        assert env.raw("EMPTY") == ""


class TestTypedGet:
    def test_same_raw_value_as_different_types(self, env: Environment) -> None:
        env.set("PORT", 80)
        assert env.get("PORT", int) == 80
        assert env.get("PORT", float) == 80.0
        assert env.get("PORT") == "80"

    def test_standard_library_types(self, env: Environment) -> None:
        env.set_raw("INT", "1")
        env.set_raw("FLOAT", "1.0")
        assert env.get("INT", int) == 1
        assert env.get("INT", float) == 1.0
        assert env.get("FLOAT", float) == 1.0
        assert env.get("FLOAT", int) is None

        env.set("INT", 10)
        env.set("FLOAT", 10.0)
        assert env.get("INT") == "10"
        assert env.get("FLOAT") == "10.0"

    def test_unset_is_none(self, env: Environment) -> None:
        assert env.get("MISSING", int) is None

    def test_invalid_is_none(self, env: Environment) -> None:
        env.set_raw("PORT", "eighty")
        assert env.get("PORT", int) is None

    def test_invalid_is_logged_at_debug(
        self, env: Environment, caplog: pytest.LogCaptureFixture
    ) -> None:
        env.set_raw("PORT", "eighty")
        with caplog.at_level(logging.DEBUG, logger="typedenv"):
            env.get("PORT", int)
        assert "PORT" in caplog.text

    def test_codec_instead_of_type(self, env: Environment) -> None:
        env.set_raw("SMALL", "300")
        assert env.get("SMALL", UINT8) is None
        env.set_raw("SMALL", "200")
        assert env.get("SMALL", UINT8) == 200

    def test_url(self, env: Environment) -> None:
        env.set_raw("URL", "https://example.com")
        url = env.get("URL", AnyUrl)
        assert url is not None
        assert url.host == "example.com"

        env.set("URL", url)
        assert env.get("URL", AnyUrl) == url

    def test_uuid(self, env: Environment) -> None:
        uuid = UUID("E621E1F8-C36C-495A-93FC-0C247A3E6E5F")
        env.set_raw("UUID", "E621E1F8-C36C-495A-93FC-0C247A3E6E5F")
        assert env.get("UUID", UUID) == uuid

        env.set("UUID", uuid)
        assert env.get("UUID", UUID) == uuid
        assert env.get("UUID") == "e621e1f8-c36c-495a-93fc-0c247a3e6e5f"

    def test_bytes(self, env: Environment) -> None:
        env.set_raw("DATA", "hello")
        assert env.get("DATA", bytes) == b"hello"
        env.set("DATA", b"hello")
        assert env.get("DATA") == "hello"

    def test_enums(self, env: Environment) -> None:
        env.set_raw("STRING_ONE", "one")
        env.set_raw("INT_TWO", "2")
        assert env.get("STRING_ONE", Mode) is Mode.ONE
        assert env.get("INT_TWO", Level) is Level.TWO

        env.set("INT_TWO", Level.TWO)
        assert env.get("INT_TWO") == "2"

        env.set_raw("INVALID", "invalid")
        assert env.get("INVALID", Mode) is None
        assert env.get("INVALID", Level) is None


class TestTypedContainers:
    def test_list(self, env: Environment) -> None:
        env.set_raw("NUMBERS", "1,2,3")
        assert env.get("NUMBERS", list[str]) == ["1", "2", "3"]
        assert env.get("NUMBERS", list[int]) == [1, 2, 3]

        env.set("NUMBERS", ["4", "5", "6"])
        assert env.get("NUMBERS") == "4,5,6"
        assert env.get("NUMBERS", list[int]) == [4, 5, 6]

    def test_set(self, env: Environment) -> None:
        env.set_raw("NUMBERS", "1,1,2")
        assert env.get("NUMBERS", set[str]) == {"1", "2"}
        assert env.get("NUMBERS", set[int]) == {1, 2}

        env.set("NUMBERS", {4, 5, 6})
        assert env.get("NUMBERS", set[int]) == {4, 5, 6}

    def test_dict(self, env: Environment) -> None:
        env.set_raw("PAIRS", "one:1,two:2")
        assert env.get("PAIRS", dict[str, str]) == {"one": "1", "two": "2"}
        assert env.get("PAIRS", dict[str, int]) == {"one": 1, "two": 2}

        env.set_raw("PAIRS", "1:one,2:two")
        assert env.get("PAIRS", dict[int, str]) == {1: "one", 2: "two"}

        env.set("PAIRS", {"three": 3, "four": 4})
        assert env.get("PAIRS", dict[str, int]) == {"three": 3, "four": 4}

    def test_empty_string(self, env: Environment) -> None:
        env.set_raw("EMPTY", "")
        assert env.get("EMPTY", list[str]) == [""]
        assert env.get("EMPTY", list[int]) is None
        assert env.get("EMPTY", set[str]) == {""}
        assert env.get("EMPTY", dict[str, str]) is None

    def test_empty_components(self, env: Environment) -> None:
        env.set_raw("COMMA", ",")
        assert env.get("COMMA", list[str]) == ["", ""]
        assert env.get("COMMA", set[str]) == {""}
        env.set_raw("COLON", ":")
        assert env.get("COLON", dict[str, str]) == {"": ""}
        assert env.get("COLON", dict[str, int]) is None


class TestTypedSet:
    def test_none_unsets(self, env: Environment, store: dict[str, str]) -> None:
        env.set("HOST", "example.com")
        env.set("HOST", None)
        assert "HOST" not in store

    def test_explicit_type(self, env: Environment) -> None:
        env.set("LEVEL", 2, Level)
        assert env.raw("LEVEL") == "2"

    def test_mixed_number_list_is_not_truncated(
        self, env: Environment, store: dict[str, str]
    ) -> None:
        with pytest.raises(TypeError):
            env.set("NUMBERS", [1, 2.5])
        assert "NUMBERS" not in store

    def test_raw_enum_value_with_explicit_type(self, env: Environment) -> None:
        env.set("MODE", "two", Mode)
        assert env.get("MODE", Mode) is Mode.TWO

    def test_no_codec_for_value(self, env: Environment) -> None:
        with pytest.raises(NoCodecError):
            env.set("OBJ", object())


class TestProcessEnvironment:
    def test_default_store_is_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPEDENV_TEST_PORT", "8080")
        assert environment.get("TYPEDENV_TEST_PORT", int) == 8080
        assert Environment().raw("TYPEDENV_TEST_PORT") == "8080"

    def test_writes_reach_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TYPEDENV_TEST_HOSTS", raising=False)
        environment.set("TYPEDENV_TEST_HOSTS", ["a", "b"])
        try:
            assert os.environ["TYPEDENV_TEST_HOSTS"] == "a,b"
        finally:
            environment.unset("TYPEDENV_TEST_HOSTS")
        assert "TYPEDENV_TEST_HOSTS" not in os.environ

"""Codec resolution — from type hints, runtime values, and type expressions.

Resolution order for :func:`codec_for`:

1. Codec instances are returned unchanged.
2. ``X | None`` resolves to the codec for ``X``.
3. ``list``/``tuple``/``set``/``frozenset``/``dict`` hints resolve their
   element codecs recursively.
4. Classes with ``from_env_string``/``to_env_string`` get a CustomCodec.
5. Enum subclasses get an EnumCodec over their value type.
6. Everything else is looked up in the registry along the class MRO.
"""

from __future__ import annotations

import collections.abc
import re
import types
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union, get_args, get_origin
from uuid import UUID

from pydantic import AnyUrl

from typedenv.codecs import scalars
from typedenv.codecs.base import NoCodecError, StringCodec, TypeExpressionError, is_codec
from typedenv.codecs.containers import MappingCodec, SequenceCodec, SetCodec
from typedenv.codecs.derived import (
    BYTES,
    CHAR,
    DECIMAL,
    URL,
    CustomCodec,
    EnumCodec,
    UrlCodec,
    has_custom_hooks,
    lossless_codec,
)

_REGISTRY: dict[type[Any], StringCodec[Any]] = {
    str: scalars.STR,
    bool: scalars.BOOL,
    int: scalars.INT,
    float: scalars.FLOAT,
    bytes: BYTES,
    Decimal: DECIMAL,
    UUID: lossless_codec(UUID),
    Path: lossless_codec(Path),
    AnyUrl: URL,
}

_SEQUENCE_ORIGINS: dict[Any, Any] = {
    list: list,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
}
_SET_ORIGINS: dict[Any, Any] = {
    set: set,
    frozenset: frozenset,
    collections.abc.Set: frozenset,
    collections.abc.MutableSet: set,
}
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


def register_codec(tp: type[Any], codec: StringCodec[Any]) -> None:
    """Register *codec* for *tp* and its subclasses."""
    _REGISTRY[tp] = codec


def is_optional(tp: Any) -> bool:
    """Check whether the type hint *tp* admits ``None``."""
    if tp is None or tp is type(None):
        return True
    if get_origin(tp) in (Union, types.UnionType):
        return type(None) in get_args(tp)
    return False


def codec_for(tp: Any) -> StringCodec[Any]:
    """Resolve the codec for a type hint.

    Raises:
        NoCodecError: If no codec exists for *tp*.
    """
    if is_codec(tp):
        return tp

    origin = get_origin(tp)
    if origin in (Union, types.UnionType):
        members = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(members) != 1:
            msg = f"No codec for union {tp!r}"
            raise NoCodecError(msg)
        return codec_for(members[0])

    if origin is not None:
        return _container_codec(tp, origin, get_args(tp))
    if tp in _SEQUENCE_ORIGINS or tp is tuple:
        return SequenceCodec(scalars.STR, tuple if tp is tuple else list)
    if tp in _SET_ORIGINS:
        return SetCodec(scalars.STR, _SET_ORIGINS[tp])
    if tp in _MAPPING_ORIGINS:
        return MappingCodec(scalars.STR, scalars.STR)

    if not isinstance(tp, type):
        msg = f"No codec for {tp!r}"
        raise NoCodecError(msg)
    if has_custom_hooks(tp):
        return CustomCodec(tp)
    if issubclass(tp, Enum):
        return EnumCodec(tp, _enum_value_codec(tp))
    if issubclass(tp, AnyUrl) and tp is not AnyUrl:
        return UrlCodec(tp)
    return _registered(tp)


def codec_for_value(value: Any) -> StringCodec[Any]:
    """Infer a codec from a runtime value.

    Containers infer their element codecs from the first element. An
    empty container formats to ``""`` whatever its element type.

    Raises:
        NoCodecError: If no codec exists for the value's type.
    """
    cls = type(value)
    if has_custom_hooks(cls) or isinstance(value, Enum):
        return codec_for(cls)
    if isinstance(value, AnyUrl):
        return URL
    if isinstance(value, (list, tuple)):
        element = codec_for_value(value[0]) if value else scalars.STR
        return SequenceCodec(element, tuple if isinstance(value, tuple) else list)
    if isinstance(value, (set, frozenset)):
        element = codec_for_value(next(iter(value))) if value else scalars.STR
        return SetCodec(element, frozenset if isinstance(value, frozenset) else set)
    if isinstance(value, collections.abc.Mapping):
        if not value:
            return MappingCodec(scalars.STR, scalars.STR)
        key, item = next(iter(value.items()))
        return MappingCodec(codec_for_value(key), codec_for_value(item))
    return _registered(cls)


def _registered(cls: type[Any]) -> StringCodec[Any]:
    for base in cls.__mro__:
        codec = _REGISTRY.get(base)
        if codec is not None:
            return codec
    msg = f"No codec for {cls.__qualname__}"
    raise NoCodecError(msg)


def _container_codec(tp: Any, origin: Any, args: tuple[Any, ...]) -> StringCodec[Any]:
    if origin in _SEQUENCE_ORIGINS:
        (element,) = args or (str,)
        return SequenceCodec(codec_for(element), _SEQUENCE_ORIGINS[origin])
    if origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:
            msg = f"Only homogeneous tuple[T, ...] hints are supported, got {tp!r}"
            raise NoCodecError(msg)
        return SequenceCodec(codec_for(args[0]), tuple)
    if origin in _SET_ORIGINS:
        (element,) = args or (str,)
        return SetCodec(_hashable(codec_for(element), tp), _SET_ORIGINS[origin])
    if origin in _MAPPING_ORIGINS:
        key, value = args or (str, str)
        return MappingCodec(_hashable(codec_for(key), tp), codec_for(value))
    msg = f"No codec for {tp!r}"
    raise NoCodecError(msg)


def _is_hashable(codec: StringCodec[Any]) -> bool:
    """Check whether values parsed by *codec* can be set elements or mapping keys."""
    if isinstance(codec, SequenceCodec):
        return codec.factory is tuple and _is_hashable(codec.element)
    if isinstance(codec, SetCodec):
        return codec.factory is frozenset
    return not isinstance(codec, MappingCodec)


def _hashable(codec: StringCodec[Any], tp: Any) -> StringCodec[Any]:
    if not _is_hashable(codec):
        msg = f"Set elements and mapping keys must be hashable in {tp!r}"
        raise NoCodecError(msg)
    return codec


def _enum_value_codec(enum_cls: type[Enum]) -> StringCodec[Any]:
    value_types = {type(member.value) for member in enum_cls}
    if len(value_types) != 1:
        msg = f"Enum {enum_cls.__qualname__} needs members of one value type"
        raise NoCodecError(msg)
    return codec_for(value_types.pop())


# --- Type expressions -------------------------------------------------

SCALAR_NAMES: dict[str, StringCodec[Any]] = {
    "str": scalars.STR,
    "string": scalars.STR,
    "char": CHAR,
    "bool": scalars.BOOL,
    "int": scalars.INT,
    "int8": scalars.INT8,
    "int16": scalars.INT16,
    "int32": scalars.INT32,
    "int64": scalars.INT64,
    "uint8": scalars.UINT8,
    "uint16": scalars.UINT16,
    "uint32": scalars.UINT32,
    "uint64": scalars.UINT64,
    "float": scalars.FLOAT,
    "float32": scalars.FLOAT32,
    "float64": scalars.FLOAT,
    "decimal": DECIMAL,
    "bytes": BYTES,
    "url": URL,
    "uuid": _REGISTRY[UUID],
    "path": _REGISTRY[Path],
}

_TOKEN = re.compile(r"\s*(?:(?P<name>[A-Za-z_][A-Za-z0-9_]*)|(?P<punct>[\[\],]))")


def codec_from_expression(text: str) -> StringCodec[Any]:
    """Parse a type expression such as ``dict[str, list[int]]`` into a codec.

    Scalars are named as in :data:`SCALAR_NAMES`; containers are
    ``list[T]``, ``set[T]`` and ``dict[K, V]``.

    Raises:
        TypeExpressionError: If *text* is not a valid type expression.
    """
    tokens = _tokenize(text)
    codec, pos = _parse_expression(tokens, 0, text)
    if pos != len(tokens):
        msg = f"Unexpected {tokens[pos]!r} in type expression {text!r}"
        raise TypeExpressionError(msg)
    return codec


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    pos = 0
    stripped = text.rstrip()
    while pos < len(stripped):
        match = _TOKEN.match(stripped, pos)
        if match is None:
            msg = f"Invalid character at offset {pos} in type expression {text!r}"
            raise TypeExpressionError(msg)
        tokens.append(match.group("name") or match.group("punct"))
        pos = match.end()
    return tokens


def _expect(tokens: list[str], pos: int, token: str, text: str) -> int:
    if pos >= len(tokens) or tokens[pos] != token:
        found = tokens[pos] if pos < len(tokens) else "end of input"
        msg = f"Expected {token!r} but found {found!r} in type expression {text!r}"
        raise TypeExpressionError(msg)
    return pos + 1


def _parse_expression(tokens: list[str], pos: int, text: str) -> tuple[StringCodec[Any], int]:
    if pos >= len(tokens):
        msg = f"Empty type expression {text!r}"
        raise TypeExpressionError(msg)
    name = tokens[pos].lower()
    pos += 1

    if name in ("list", "set"):
        pos = _expect(tokens, pos, "[", text)
        element, pos = _parse_expression(tokens, pos, text)
        pos = _expect(tokens, pos, "]", text)
        if name == "list":
            return SequenceCodec(element), pos
        if not _is_hashable(element):
            msg = f"Set elements must be hashable in type expression {text!r}"
            raise TypeExpressionError(msg)
        return SetCodec(element), pos

    if name == "dict":
        pos = _expect(tokens, pos, "[", text)
        key, pos = _parse_expression(tokens, pos, text)
        if not _is_hashable(key):
            msg = f"Mapping keys must be hashable in type expression {text!r}"
            raise TypeExpressionError(msg)
        pos = _expect(tokens, pos, ",", text)
        value, pos = _parse_expression(tokens, pos, text)
        pos = _expect(tokens, pos, "]", text)
        return MappingCodec(key, value), pos

    codec = SCALAR_NAMES.get(name)
    if codec is None:
        msg = f"Unknown type {tokens[pos - 1]!r} in type expression {text!r}"
        raise TypeExpressionError(msg)
    return codec, pos

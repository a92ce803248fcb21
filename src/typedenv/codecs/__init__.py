"""String codecs for environment values."""

from typedenv.codecs.base import NoCodecError, StringCodec, TypeExpressionError
from typedenv.codecs.containers import MappingCodec, SequenceCodec, SetCodec
from typedenv.codecs.derived import (
    BYTES,
    CHAR,
    DECIMAL,
    URL,
    CustomCodec,
    EnumCodec,
    LosslessCodec,
    UrlCodec,
    lossless_codec,
)
from typedenv.codecs.resolve import (
    codec_for,
    codec_for_value,
    codec_from_expression,
    is_optional,
    register_codec,
)
from typedenv.codecs.scalars import (
    BOOL,
    FLOAT,
    FLOAT32,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    STR,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    FloatCodec,
    IntegerCodec,
)

__all__ = [
    "BOOL",
    "BYTES",
    "CHAR",
    "DECIMAL",
    "FLOAT",
    "FLOAT32",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "STR",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "URL",
    "CustomCodec",
    "EnumCodec",
    "FloatCodec",
    "IntegerCodec",
    "LosslessCodec",
    "MappingCodec",
    "NoCodecError",
    "SequenceCodec",
    "SetCodec",
    "StringCodec",
    "TypeExpressionError",
    "UrlCodec",
    "codec_for",
    "codec_for_value",
    "codec_from_expression",
    "is_optional",
    "lossless_codec",
    "register_codec",
]

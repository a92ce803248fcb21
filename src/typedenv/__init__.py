"""typedenv — typed access to process environment variables."""

from typedenv.codecs import (
    NoCodecError,
    StringCodec,
    codec_for,
    lossless_codec,
    register_codec,
)
from typedenv.environment import Environment, environment
from typedenv.variable import EnvironmentVariable

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "EnvironmentVariable",
    "NoCodecError",
    "StringCodec",
    "__version__",
    "codec_for",
    "environment",
    "lossless_codec",
    "register_codec",
]

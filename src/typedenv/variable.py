"""EnvironmentVariable — a named, default-backed binding to one variable.

Holds ``(name, default, codec)`` and evaluates the environment fresh on
every read. Nothing is cached.

Example::

    class ServerSettings:
        host = EnvironmentVariable("HOST", AnyUrl | None)
        port = EnvironmentVariable("PORT", int, default=8000)

    ServerSettings.port.get()      # 8000 until PORT is set
    ServerSettings.port.set(9000)  # PORT=9000
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from typedenv.codecs import codec_for, is_optional
from typedenv.environment import Environment
from typedenv.environment import environment as _process_environment

T = TypeVar("T")


class EnvironmentVariable(Generic[T]):
    """A (name, default, codec) binding.

    Reads fall back to *default* when the variable is unset or does not
    parse. A binding is optional when its type hint admits None (or
    ``optional=True`` is passed with a bare codec); writing None to an
    optional binding unsets the variable.

    Args:
        name: Environment variable name.
        as_type: Type hint or codec for the value.
        default: Value returned when the variable is unset or invalid.
        optional: Override the optionality inferred from *as_type*.
        environment: Accessor to use; defaults to the process environment.

    Raises:
        TypeError: If a non-optional binding has no default.
    """

    def __init__(
        self,
        name: str,
        as_type: Any,
        default: T | None = None,
        *,
        optional: bool | None = None,
        environment: Environment | None = None,
    ) -> None:
        self.name = name
        self.default = default
        self.optional = is_optional(as_type) if optional is None else optional
        self._codec = codec_for(as_type)
        self._environment = _process_environment if environment is None else environment
        if default is None and not self.optional:
            msg = f"Non-optional environment variable {name} needs a default"
            raise TypeError(msg)

    def __repr__(self) -> str:
        return f"EnvironmentVariable({self.name!r}, default={self.default!r})"

    def get(self) -> T | None:
        """Return the current value, or the default if unset or unparseable."""
        value = self._environment.get(self.name, self._codec)
        return self.default if value is None else value

    def set(self, value: T | None) -> None:
        """Store *value*; None unsets an optional binding.

        Raises:
            TypeError: If *value* is None and the binding is not optional.
        """
        if value is None:
            if not self.optional:
                msg = f"Cannot assign None to non-optional environment variable {self.name}"
                raise TypeError(msg)
            self._environment.unset(self.name)
            return
        self._environment.set_raw(self.name, self._codec.format(value))

    def reset(self) -> None:
        """Unset the variable so reads return the default."""
        self._environment.unset(self.name)

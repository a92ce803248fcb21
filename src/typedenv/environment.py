"""Environment — typed read/write access to process environment variables.

The store is ``os.environ`` unless another mapping is injected. Reads
return None when the variable is unset or its value does not parse as
the requested type; writes of None unset the variable.

No locking is done. Concurrent writers to the same name race exactly as
they would on ``os.environ`` directly.
"""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from typing import Any

from typedenv.codecs import codec_for, codec_for_value

logger = logging.getLogger(__name__)


class Environment:
    """Typed accessor over an environment store.

    Example::

        env = Environment()
        env.set("PORT", 8080)
        port = env.get("PORT", int)          # 8080
        hosts = env.get("HOSTS", list[str])  # None if unset
    """

    def __init__(self, store: MutableMapping[str, str] | None = None) -> None:
        self._store: MutableMapping[str, str] = os.environ if store is None else store

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def __repr__(self) -> str:
        source = "os.environ" if self._store is os.environ else type(self._store).__name__
        return f"Environment({source})"

    # --- Raw access ---

    def raw(self, name: str) -> str | None:
        """Return the raw string stored under *name*, or None if unset."""
        return self._store.get(name)

    def set_raw(self, name: str, value: str | None) -> None:
        """Store *value* under *name*, or unset *name* when *value* is None."""
        if value is None:
            self.unset(name)
        else:
            self._store[name] = value

    def unset(self, name: str) -> None:
        """Remove *name*. Unsetting a missing name is a no-op."""
        self._store.pop(name, None)

    # --- Typed access ---

    def get(self, name: str, as_type: Any = str) -> Any | None:
        """Return the value of *name* converted to *as_type*.

        *as_type* is a type hint (``int``, ``list[int]``, an Enum) or a codec.
        Returns None if the variable is unset or its value does not parse.
        """
        raw = self.raw(name)
        if raw is None:
            return None
        value = codec_for(as_type).parse(raw)
        if value is None:
            logger.debug("Ignoring %s: %r does not parse as %r", name, raw, as_type)
        return value

    def set(self, name: str, value: Any, as_type: Any = None) -> None:
        """Format *value* and store it under *name*; None unsets *name*.

        Without *as_type* the codec is inferred from the value.
        """
        if value is None:
            self.unset(name)
            return
        codec = codec_for_value(value) if as_type is None else codec_for(as_type)
        self._store[name] = codec.format(value)


environment = Environment()

"""Delimiter-encoded container codecs: sequences, sets, and mappings.

Wire format:

- sequence/set: element encodings joined by ``,``
- mapping: ``key:value`` pairs joined by ``,``

There is no escaping or quoting. An element whose encoding contains a
delimiter cannot be decoded back; this is a limitation of the format.

INVARIANT: A container parse is all-or-nothing. If any element or pair
fails, the whole parse returns None.

Splitting ``""`` on ``,`` yields one empty component, so ``list[str]``
parses ``""`` as ``[""]`` and ``list[int]`` rejects it. Mappings reject
``""`` because the lone component has no ``:``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from typedenv.codecs.base import StringCodec

ELEMENT_DELIMITER = ","
PAIR_DELIMITER = ":"


def _parse_elements(raw: str, element: StringCodec[Any]) -> list[Any] | None:
    elements: list[Any] = []
    for part in raw.split(ELEMENT_DELIMITER):
        value = element.parse(part)
        if value is None:
            return None
        elements.append(value)
    return elements


def _join(values: Iterable[Any], element: StringCodec[Any]) -> str:
    return ELEMENT_DELIMITER.join(element.format(v) for v in values)


@dataclass(frozen=True)
class SequenceCodec:
    """Ordered sequence of elements.

    Attributes:
        element: Codec for each element.
        factory: Builds the result from the parsed list (``list`` or ``tuple``).
    """

    element: StringCodec[Any]
    factory: Callable[[list[Any]], Any] = list

    def parse(self, raw: str) -> Any | None:
        elements = _parse_elements(raw, self.element)
        if elements is None:
            return None
        return self.factory(elements)

    def format(self, value: Iterable[Any]) -> str:
        return _join(value, self.element)


@dataclass(frozen=True)
class SetCodec:
    """Unordered set of elements; duplicates in the input merge.

    Encoding order follows the set's iteration order, which is unspecified.
    """

    element: StringCodec[Any]
    factory: Callable[[list[Any]], Any] = set

    def parse(self, raw: str) -> Any | None:
        elements = _parse_elements(raw, self.element)
        if elements is None:
            return None
        return self.factory(elements)

    def format(self, value: Iterable[Any]) -> str:
        return _join(value, self.element)


@dataclass(frozen=True)
class MappingCodec:
    """``key:value`` pairs. A later duplicate key overwrites an earlier one."""

    key: StringCodec[Any]
    value: StringCodec[Any]

    def parse(self, raw: str) -> dict[Any, Any] | None:
        pairs: dict[Any, Any] = {}
        for pair in raw.split(ELEMENT_DELIMITER):
            parts = pair.split(PAIR_DELIMITER)
            if len(parts) != 2:
                return None
            key = self.key.parse(parts[0])
            value = self.value.parse(parts[1])
            if key is None or value is None:
                return None
            pairs[key] = value
        return pairs

    def format(self, value: Mapping[Any, Any]) -> str:
        return ELEMENT_DELIMITER.join(
            f"{self.key.format(k)}{PAIR_DELIMITER}{self.value.format(v)}"
            for k, v in value.items()
        )

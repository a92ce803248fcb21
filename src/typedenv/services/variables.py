"""VariableService — inspect environment variables against type expressions.

Backs the ``get``, ``parse`` and ``check`` commands. Conversion failures
become failed ServiceResults; the codecs themselves only ever return None.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any

from typedenv.codecs import StringCodec, TypeExpressionError, codec_from_expression
from typedenv.environment import Environment
from typedenv.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_UNSET = "unset"
STATUS_INVALID = "invalid"


def to_jsonable(value: Any) -> Any:
    """Convert a decoded value into JSON-friendly data for output.

    Sets become sorted lists so output is stable across runs.
    """
    if isinstance(value, Enum):
        return value.name
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", "backslashreplace")
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        items = [to_jsonable(v) for v in value]
        try:
            return sorted(items)
        except TypeError:
            return sorted(items, key=repr)
    if isinstance(value, Sequence):
        return [to_jsonable(v) for v in value]
    return str(value)


class VariableService:
    """Typed inspection of environment variables.

    Args:
        environment: Accessor to read from; defaults to the process environment.
    """

    def __init__(self, environment: Environment | None = None) -> None:
        self._environment = environment if environment is not None else Environment()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, name: str, type_expr: str = "str", *, default: str | None = None) -> ServiceResult:
        """Read *name* and convert it to *type_expr*.

        *default* is a raw string used when *name* is unset. It must parse
        as *type_expr* too. A set-but-invalid value does not fall back.
        """
        op = "get"
        codec, error = self._resolve(op, type_expr)
        if error is not None:
            return error
        assert codec is not None

        raw = self._environment.raw(name)
        source = "environment"
        if raw is None:
            if default is None:
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="UNSET",
                        message=f"{name} is not set",
                        detail={"name": name},
                    ),
                )
            raw, source = default, "default"

        value = codec.parse(raw)
        if value is None:
            code = "INVALID_DEFAULT" if source == "default" else "INVALID_VALUE"
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=code,
                    message=f"{raw!r} is not a valid {type_expr}",
                    detail={"name": name, "type": type_expr, "raw": raw},
                ),
            )

        logger.debug("Read %s as %s from %s", name, type_expr, source)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "type": type_expr,
                "source": source,
                "raw": raw,
                "value": to_jsonable(value),
                "encoded": codec.format(value),
            },
        )

    def parse(self, raw: str, type_expr: str = "str") -> ServiceResult:
        """Convert a literal *raw* string without touching the environment."""
        op = "parse"
        codec, error = self._resolve(op, type_expr)
        if error is not None:
            return error
        assert codec is not None

        value = codec.parse(raw)
        if value is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_VALUE",
                    message=f"{raw!r} is not a valid {type_expr}",
                    detail={"type": type_expr, "raw": raw},
                ),
            )

        encoded = codec.format(value)
        warnings: list[str] = []
        if encoded != raw:
            warnings.append(f"Canonical form differs from input: {encoded!r}")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": type_expr,
                "raw": raw,
                "value": to_jsonable(value),
                "encoded": encoded,
            },
            warnings=warnings,
        )

    def check(self, specs: Sequence[tuple[str, str]], *, require: bool = False) -> ServiceResult:
        """Validate several ``(name, type_expr)`` pairs at once.

        Unset variables pass unless *require* is True. Any present value
        that does not parse fails the whole check.
        """
        op = "check"
        codecs: list[StringCodec[Any]] = []
        for _name, type_expr in specs:
            codec, error = self._resolve(op, type_expr)
            if error is not None:
                return error
            assert codec is not None
            codecs.append(codec)

        items: list[dict[str, Any]] = []
        for (name, type_expr), codec in zip(specs, codecs, strict=True):
            raw = self._environment.raw(name)
            if raw is None:
                status = STATUS_UNSET
            elif codec.parse(raw) is None:
                status = STATUS_INVALID
            else:
                status = STATUS_OK
            items.append({"name": name, "type": type_expr, "status": status, "raw": raw})

        failed = [
            item
            for item in items
            if item["status"] == STATUS_INVALID or (require and item["status"] == STATUS_UNSET)
        ]
        if failed:
            names = ", ".join(item["name"] for item in failed)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="CHECK_FAILED",
                    message=f"{len(failed)} of {len(items)} variables failed: {names}",
                    detail={"items": items},
                ),
            )

        warnings = [
            f"{item['name']} is not set" for item in items if item["status"] == STATUS_UNSET
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items)},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve(op: str, type_expr: str) -> tuple[StringCodec[Any] | None, ServiceResult | None]:
        try:
            return codec_from_expression(type_expr), None
        except TypeExpressionError as exc:
            return None, ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_TYPE",
                    message=str(exc),
                    detail={"type": type_expr},
                ),
            )

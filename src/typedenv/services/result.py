"""ServiceResult and ServiceError — what every CLI-facing operation returns.

INVARIANT: Service methods report failures in the result, never by
raising. Only programming errors propagate as exceptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    Attributes:
        code: Machine-readable error code (``UNSET``, ``INVALID_VALUE``, ...).
        message: Human-readable description.
        detail: Extra context, e.g. per-variable check results.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for inspection operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"get"``, ``"parse"``, ``"check"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None


"""Service results for the ``plan`` and ``profile show`` commands.

Every public service method returns a :class:`ServiceResult`.  Expected
failures such as an out-of-range hydration or an unreadable profile come
back as ``ok=False`` with a :class:`ServiceError`; they are never raised.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class Op(StrEnum):
    """Operation names carried in ``ServiceResult.op``."""

    PLAN = "plan"
    PROFILE_SHOW = "profile_show"


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is stable for scripts (``VALIDATION``, ``INVALID_RANGE``,
    ``PROFILE_*``); ``detail`` carries the offending fields or path.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: Whether the operation succeeded.
        op: An :class:`Op` value.
        data: For ``plan``: params, ingredients, timeline and schedule.
            For ``profile_show``: path and stored fields.
        warnings: Non-fatal issues, e.g. an ignored ``--start``.
        error: Set when ``ok`` is False.
        meta: Telemetry span tree in verbose mode.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None

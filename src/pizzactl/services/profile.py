"""ProfileService — inspect saved parameter profiles."""

from __future__ import annotations

from pathlib import Path

from pizzactl.infrastructure.profiles import ProfileError, read_profile
from pizzactl.services.base import BaseService
from pizzactl.services.result import Op, ServiceResult
from pizzactl.services.telemetry import traced


class ProfileService(BaseService):
    """Read-only access to profile documents."""

    @traced
    def show(self, path: Path) -> ServiceResult:
        """Return the fields stored in the profile at *path*."""
        try:
            layer = read_profile(path)
        except ProfileError as exc:
            return self._fail(Op.PROFILE_SHOW, exc.code, exc.message, path=str(exc.path))

        fields = layer.model_dump(mode="json", exclude_none=True)
        warnings: list[str] = []
        if "w" not in fields:
            warnings.append("Profile has no flour strength (w); pass --w when planning")
        return ServiceResult(
            ok=True,
            op=Op.PROFILE_SHOW,
            data={"path": str(path), "fields": fields, "count": len(fields)},
            warnings=warnings,
        )

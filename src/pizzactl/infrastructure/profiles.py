"""Profile document storage.

A profile is a flat JSON object holding the fields of
:class:`~pizzactl.domain.params.RecipeParams`.  Reading is lenient about
missing fields (a hand-written profile may be sparse); writing always
stores the complete effective parameter set.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from pizzactl.domain.params import RecipeOverrides, RecipeParams

PROFILE_READ_FAILED = "PROFILE_READ_FAILED"
PROFILE_INVALID = "PROFILE_INVALID"
PROFILE_WRITE_FAILED = "PROFILE_WRITE_FAILED"


class ProfileError(Exception):
    """A profile could not be read, parsed, or written."""

    def __init__(self, code: str, message: str, path: Path) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path


def read_profile(path: Path) -> RecipeOverrides:
    """Load a profile document as an override layer.

    Raises:
        ProfileError: ``PROFILE_READ_FAILED`` if the file cannot be read,
            ``PROFILE_INVALID`` if it is not a valid profile document.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProfileError(
            PROFILE_READ_FAILED, f"Failed to read profile: {path}", path
        ) from exc
    except UnicodeDecodeError as exc:
        raise ProfileError(
            PROFILE_INVALID, f"Profile is not UTF-8 text: {path}", path
        ) from exc
    try:
        return RecipeOverrides.model_validate_json(raw)
    except ValidationError as exc:
        raise ProfileError(PROFILE_INVALID, f"Invalid profile JSON: {path}", path) from exc


def write_profile(path: Path, params: RecipeParams) -> None:
    """Write *params* as a pretty-printed JSON profile.

    Creates parent directories if they don't exist.

    Raises:
        ProfileError: ``PROFILE_WRITE_FAILED`` on any filesystem error.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(params.model_dump_json(indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ProfileError(
            PROFILE_WRITE_FAILED, f"Failed to save profile: {exc}", path
        ) from exc

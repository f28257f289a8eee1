"""Yeast classification enum."""

from __future__ import annotations

from enum import StrEnum


class YeastKind(StrEnum):
    """Baker's yeast variants supported by the ingredient model."""

    DRY = "dry"
    FRESH = "fresh"

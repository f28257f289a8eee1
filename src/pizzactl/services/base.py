"""BaseService — shared foundation for pizzactl services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pizzactl.services.result import ServiceResult

if TYPE_CHECKING:
    from pizzactl.config.settings import PizzaSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Services receive the unified settings at construction time and never
    touch Click or Rich.
    """

    def __init__(self, settings: PizzaSettings) -> None:
        self._settings = settings

    @staticmethod
    def _fail(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result and log it at debug level."""
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult.failure(op, code, message, **detail)

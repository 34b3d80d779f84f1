"""BaseService — shared foundation for digitlist services.

Every service receives the resolved :class:`DigitSettings` at construction
time and reads its limits and defaults from there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from digitlist.domain.digits import InvalidFormatError, NegativeArgumentError
from digitlist.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from digitlist.config.settings import DigitSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ArithmeticService(BaseService):
            def add(self, left: str, right: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: DigitSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _from_domain_error(self, op: str, exc: ValueError) -> ServiceResult:
        """Translate a domain input-contract violation into a failed result."""
        logger.debug("%s rejected: %s", op, exc)
        if isinstance(exc, InvalidFormatError):
            return self._failure(
                op, "INVALID_FORMAT", str(exc), text=exc.text, reason=exc.reason
            )
        if isinstance(exc, NegativeArgumentError):
            return self._failure(
                op, "NEGATIVE_ARGUMENT", str(exc), argument=exc.name, value=exc.value
            )
        return self._failure(op, "INVALID_ARGUMENT", str(exc))

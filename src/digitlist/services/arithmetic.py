"""ArithmeticService — DigitList operations behind the ServiceResult contract.

Pipeline for every operation: VALIDATE → COMPUTE → RESPOND

Every successful result carries ``value`` (decimal text) and ``digits``
(digit count) plus the inputs that produced it.
"""

from __future__ import annotations

import logging
from typing import Any

from digitlist.domain.digits import (
    DigitList,
    DigitListError,
    check_count,
    factorial,
    power,
)
from digitlist.domain.types import MultiplyStrategy, ScaleDirection
from digitlist.services.base import BaseService
from digitlist.services.result import ServiceResult
from digitlist.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ArithmeticService(BaseService):
    """Parses operands, enforces configured limits, and runs DigitList arithmetic."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def parse(self, text: str) -> ServiceResult:
        """Validate *text* and report its canonical form and digit count."""
        op = "parse"
        try:
            value = DigitList(text)
        except DigitListError as exc:
            return self._from_domain_error(op, exc)
        return self._respond(op, value)

    @traced
    def add(self, left: str, right: str) -> ServiceResult:
        op = "add"
        try:
            a = DigitList(left)
            b = DigitList(right)
        except DigitListError as exc:
            return self._from_domain_error(op, exc)

        with trace_span("add", operand_digits=[a.size(), b.size()]):
            value = a.add(b)
        return self._respond(op, value, left=left, right=right)

    @traced
    def multiply(
        self,
        text: str,
        x: int,
        *,
        strategy: MultiplyStrategy | str | None = None,
    ) -> ServiceResult:
        """Multiply decimal *text* by the machine integer *x*."""
        op = "multiply"
        try:
            chosen = self._resolve_strategy(strategy)
        except ValueError as exc:
            return self._from_domain_error(op, exc)

        refused = self._check_limits(op, "x", x, chosen)
        if refused is not None:
            return refused

        try:
            check_count("x", x)
            operand = DigitList(text)
        except DigitListError as exc:
            return self._from_domain_error(op, exc)

        with trace_span(
            "multiply", strategy=chosen.value, operand_digits=operand.size(), multiplier=x
        ):
            value = operand.multiply(x, chosen)
        return self._respond(op, value, operand=text, x=x, strategy=chosen.value)

    @traced
    def scale(
        self,
        text: str,
        direction: ScaleDirection | str,
        *,
        times: int = 1,
    ) -> ServiceResult:
        """Multiply (``up``) or truncating-divide (``down``) by ten, *times* times."""
        op = "scale"
        try:
            chosen = ScaleDirection(direction)
        except ValueError:
            return self._failure(
                op,
                "INVALID_ARGUMENT",
                f"Unknown scale direction: {direction!r}. Allowed: "
                f"{[d.value for d in ScaleDirection]}",
            )

        refused = self._check_limits(op, "times", times)
        if refused is not None:
            return refused

        try:
            check_count("times", times)
            value = DigitList(text)
        except DigitListError as exc:
            return self._from_domain_error(op, exc)

        step = value.multiply10 if chosen is ScaleDirection.UP else value.divide10
        with trace_span("scale", direction=chosen.value, times=times):
            for _ in range(times):
                step()
        return self._respond(op, value, operand=text, direction=chosen.value, times=times)

    @traced
    def factorial(
        self,
        n: int,
        *,
        strategy: MultiplyStrategy | str | None = None,
    ) -> ServiceResult:
        op = "factorial"
        try:
            chosen = self._resolve_strategy(strategy)
        except ValueError as exc:
            return self._from_domain_error(op, exc)

        # The largest multiplier used is n itself.
        refused = self._check_limits(op, "n", n, chosen)
        if refused is not None:
            return refused

        try:
            with trace_span("factorial", strategy=chosen.value, multiplications=max(n, 0)):
                value = factorial(n, chosen)
        except DigitListError as exc:
            return self._from_domain_error(op, exc)
        return self._respond(op, value, n=n, strategy=chosen.value)

    @traced
    def power(
        self,
        x: int,
        y: int,
        *,
        strategy: MultiplyStrategy | str | None = None,
    ) -> ServiceResult:
        op = "power"
        try:
            chosen = self._resolve_strategy(strategy)
        except ValueError as exc:
            return self._from_domain_error(op, exc)

        refused = self._check_limits(op, "x", x, chosen) or self._check_limits(op, "y", y)
        if refused is not None:
            return refused

        try:
            with trace_span(
                "power", strategy=chosen.value, multiplier=x, multiplications=max(y, 0)
            ):
                value = power(x, y, chosen)
        except DigitListError as exc:
            return self._from_domain_error(op, exc)
        return self._respond(op, value, x=x, y=y, strategy=chosen.value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_strategy(self, strategy: MultiplyStrategy | str | None) -> MultiplyStrategy:
        if strategy is None:
            return self._settings.arithmetic.multiply_strategy
        return MultiplyStrategy(strategy)

    def _check_limits(
        self,
        op: str,
        name: str,
        value: int,
        strategy: MultiplyStrategy | None = None,
    ) -> ServiceResult | None:
        """Refuse machine-integer arguments above the configured ceilings."""
        limits = self._settings.limits
        ceiling = limits.max_argument
        setting = "limits.max_argument"
        if strategy is MultiplyStrategy.REPEATED_ADDITION and (
            limits.max_repeated_addition < ceiling
        ):
            ceiling = limits.max_repeated_addition
            setting = "limits.max_repeated_addition"

        if value <= ceiling:
            return None
        logger.debug("%s refused: %s=%d exceeds %s=%d", op, name, value, setting, ceiling)
        return self._failure(
            op,
            "LIMIT_EXCEEDED",
            f"{name}={value} exceeds {setting} ({ceiling})",
            argument=name,
            value=value,
            limit=ceiling,
        )

    def _respond(self, op: str, value: DigitList, **inputs: Any) -> ServiceResult:
        size = value.size()
        shown = self._settings.output.max_digits_shown
        warnings: list[str] = []
        if size > shown:
            warnings.append(f"Result has {size} digits; human output shows the first {shown}")
        return ServiceResult(
            ok=True,
            op=op,
            data={"value": value.to_text(), "digits": size, **inputs},
            warnings=warnings,
        )

"""Timing spans for arithmetic service calls, active only under --verbose.

A ``@traced`` service method opens a root :class:`Span`; ``trace_span``
blocks inside it become children annotated with the numbers that drive
the cost of the work (operand sizes, multiplier, strategy).  When the
call returns, the tree is attached to ``ServiceResult.meta["telemetry"]``
and one ``span.complete`` event is logged with the result's digit count.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Concatenate, ParamSpec

import structlog

from digitlist.services.result import ServiceResult

log = structlog.get_logger("digitlist.telemetry")

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("_active", default=None)


@dataclass
class Span:
    """One timed stage of an arithmetic call."""

    name: str
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)
    started: float = field(default_factory=time.perf_counter)
    elapsed_ms: float | None = None

    def close(self) -> None:
        self.elapsed_ms = (time.perf_counter() - self.started) * 1000

    def annotate(self, **values: Any) -> None:
        self.annotations.update(values)

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.elapsed_ms or 0.0, 2),
        }
        if self.annotations:
            tree["annotations"] = self.annotations
        if self.children:
            tree["children"] = [child.to_dict() for child in self.children]
        return tree


@contextmanager
def trace_span(name: str, **annotations: Any) -> Iterator[Span | None]:
    """Time a stage of the enclosing ``@traced`` call.

    Yields None (and records nothing) outside a traced call.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    span = Span(name, annotations=dict(annotations))
    parent.children.append(span)
    token = _active.set(span)
    try:
        yield span
    finally:
        span.close()
        _active.reset(token)


_P = ParamSpec("_P")


def traced(
    method: Callable[Concatenate[Any, _P], ServiceResult],
) -> Callable[Concatenate[Any, _P], ServiceResult]:
    """Wrap a service method so its span tree lands in ``result.meta``."""

    @functools.wraps(method)
    def wrapper(self: Any, *args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return method(self, *args, **kwargs)

        root = Span(method.__qualname__)
        token = _active.set(root)
        try:
            result = method(self, *args, **kwargs)
        finally:
            root.close()
            _active.reset(token)

        digits = result.data.get("digits") if result.ok else None
        if digits is not None:
            root.annotate(result_digits=digits)
        log.debug(
            "span.complete",
            op=result.op,
            span_name=root.name,
            ok=result.ok,
            duration_ms=round(root.elapsed_ms or 0.0, 2),
            result_digits=digits,
            stages=[child.name for child in root.children],
        )
        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper


def enable_telemetry() -> None:
    """Turn span recording on for this context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)

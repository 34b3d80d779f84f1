"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Every successful arithmetic result is shown as a status line, the
expression that was evaluated, the value, and its digit count.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from digitlist.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from digitlist.services.result import ServiceResult


# Keys rendered by the value block rather than as plain input fields.
_VALUE_KEYS = ("value", "digits")


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    max_digits: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Values longer than *max_digits* are cut and marked with the number of
    hidden digits; ``--json`` and ``--quiet`` always carry the full value.
    """
    console = create_console()

    if result.ok:
        _status_line(console, result)
        expression = _EXPRESSIONS.get(result.op)
        if expression is not None:
            _field(console, "expr", expression(result.data), style="digit.expr")
        _render_value(console, result, max_digits=max_digits)
        if verbose:
            _render_inputs(console, result)
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return str(result.data.get("value", f"OK: {result.op}"))


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "digit.ok"), (f"  {result.op}", "digit.op")))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field without wrapping long values."""
    k = Text(f"  {key}: ", style="digit.key")
    v = Text(str(value), style=style)
    console.print(k, v, sep="", soft_wrap=True)


def truncate_value(value: str, max_digits: int | None) -> str:
    """Cut *value* to *max_digits* leading digits, noting how many were hidden."""
    if max_digits is None or len(value) <= max_digits:
        return value
    hidden = len(value) - max_digits
    return f"{value[:max_digits]}… (+{hidden} digits)"


def _render_value(console: Console, result: ServiceResult, *, max_digits: int | None) -> None:
    value = result.data.get("value")
    if value is None:
        return
    _field(console, "value", truncate_value(str(value), max_digits), style="digit.value")
    _field(console, "digits", result.data.get("digits", len(str(value))))


def _render_inputs(console: Console, result: ServiceResult) -> None:
    for key, value in result.data.items():
        if key not in _VALUE_KEYS:
            _field(console, key, value)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "digit.error"), (f"  {result.op}", "digit.op"), " — ", msg),
        soft_wrap=True,
    )

    if err:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Expressions ───────────────────────────────────────────────────────


def _scale_expr(data: dict[str, Any]) -> str:
    symbol = "×" if data.get("direction") == "up" else "÷"
    times = data.get("times", 1)
    factor = "10" if times == 1 else f"10^{times}"
    return f"{data.get('operand')} {symbol} {factor}"


_EXPRESSIONS: dict[str, Callable[[dict[str, Any]], str]] = {
    "add": lambda d: f"{d.get('left')} + {d.get('right')}",
    "multiply": lambda d: f"{d.get('operand')} × {d.get('x')}",
    "scale": _scale_expr,
    "factorial": lambda d: f"{d.get('n')}!",
    "power": lambda d: f"{d.get('x')}^{d.get('y')}",
}

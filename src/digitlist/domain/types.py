"""Classification enums shared by the domain and service layers."""

from __future__ import annotations

from enum import StrEnum


class MultiplyStrategy(StrEnum):
    """Algorithms available to :meth:`DigitList.multiply`.

    Both produce identical values; they differ only in cost.
    """

    SCHOOLBOOK = "schoolbook"
    REPEATED_ADDITION = "repeated-addition"


class ScaleDirection(StrEnum):
    """Direction of a scale-by-ten operation."""

    UP = "up"
    DOWN = "down"

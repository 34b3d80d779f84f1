"""Tests for domain enums."""

from digitlist.domain.types import MultiplyStrategy, ScaleDirection


class TestMultiplyStrategy:
    def test_values(self) -> None:
        assert MultiplyStrategy.SCHOOLBOOK == "schoolbook"
        assert MultiplyStrategy.REPEATED_ADDITION == "repeated-addition"

    def test_from_string(self) -> None:
        assert MultiplyStrategy("repeated-addition") is MultiplyStrategy.REPEATED_ADDITION


class TestScaleDirection:
    def test_values(self) -> None:
        assert [d.value for d in ScaleDirection] == ["up", "down"]

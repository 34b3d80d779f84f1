"""DigitList — a non-negative integer stored as decimal digits, ones place first.

135642 is held as ``[2, 4, 6, 5, 3, 1]``.

INVARIANT: the digit list is never empty and every element is in [0, 9].
INVARIANT: the most-significant digit is non-zero unless the value is 0.

Scale operations (``multiply10``/``divide10``) mutate in place and return
``self``.  Arithmetic (``add``/``multiply``) returns a new DigitList and
never touches its operands.
"""

from __future__ import annotations

import itertools
import re

from digitlist.domain.types import MultiplyStrategy

DECIMAL_PATTERN: re.Pattern[str] = re.compile(r"0|[1-9][0-9]*")

_DIGIT_CHARS = "0123456789"


# --- Errors ---


class DigitListError(ValueError):
    """Base class for DigitList input-contract violations."""


class InvalidFormatError(DigitListError):
    """Decimal text that is empty, contains a non-digit, or has a leading zero."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid decimal text {text!r}: {reason}")


class NegativeArgumentError(DigitListError):
    """A multiplier, count, or exponent below zero."""

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be non-negative, got {value}")


def _diagnose(text: str) -> str:
    """Explain why *text* does not match :data:`DECIMAL_PATTERN`."""
    if not text:
        return "empty string"
    for pos, ch in enumerate(text):
        if ch not in _DIGIT_CHARS:
            return f"non-digit character {ch!r} at position {pos}"
    return "leading zero"


def check_count(name: str, value: int) -> None:
    """Reject anything that is not a non-negative ``int``.

    ``bool`` is refused even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise NegativeArgumentError(name, value)


# --- Value type ---


class DigitList:
    """Arbitrary-precision non-negative integer over a list of decimal digits.

    Usage::

        a = DigitList("9999")
        b = a.add(DigitList("2"))      # DigitList('10001'), a unchanged
        a.multiply10().divide10()      # mutates a, returns a
    """

    __slots__ = ("_digits",)

    # Mutable: scale operations change the value in place.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: str = "0") -> None:
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        if DECIMAL_PATTERN.fullmatch(text) is None:
            raise InvalidFormatError(text, _diagnose(text))
        self._digits: list[int] = [_DIGIT_CHARS.index(ch) for ch in reversed(text)]

    @classmethod
    def from_int(cls, value: int) -> DigitList:
        """Build a DigitList from a non-negative Python ``int``."""
        check_count("value", value)
        digits: list[int] = []
        while True:
            value, digit = divmod(value, 10)
            digits.append(digit)
            if value == 0:
                break
        return cls._wrap(digits)

    @classmethod
    def _wrap(cls, digits: list[int]) -> DigitList:
        """Adopt an already-valid little-endian digit list without copying."""
        obj = cls.__new__(cls)
        obj._digits = digits
        return obj

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def digits(self) -> tuple[int, ...]:
        """Snapshot of the digits, least-significant first."""
        return tuple(self._digits)

    def size(self) -> int:
        """Number of digits (always >= 1)."""
        return len(self._digits)

    def is_zero(self) -> bool:
        return len(self._digits) == 1 and self._digits[0] == 0

    def copy(self) -> DigitList:
        return DigitList._wrap(list(self._digits))

    def to_text(self) -> str:
        """Canonical decimal text, most-significant digit first."""
        return "".join(_DIGIT_CHARS[d] for d in reversed(self._digits))

    def __len__(self) -> int:
        return len(self._digits)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"DigitList({self.to_text()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitList):
            return NotImplemented
        return self._digits == other._digits

    # ------------------------------------------------------------------
    # Scale by ten (in place)
    # ------------------------------------------------------------------

    def divide10(self) -> DigitList:
        """Truncating division by 10. A single digit becomes 0."""
        if len(self._digits) == 1:
            self._digits[0] = 0
        else:
            del self._digits[0]
        return self

    def multiply10(self) -> DigitList:
        """Multiply by 10. Zero stays zero (no growth)."""
        if not self.is_zero():
            self._digits.insert(0, 0)
        return self

    # ------------------------------------------------------------------
    # Arithmetic (new value)
    # ------------------------------------------------------------------

    def add(self, other: DigitList) -> DigitList:
        """Return ``self + other`` as a new DigitList.

        Walks both digit lists from the ones place, treating the shorter
        one as zero-padded, and appends a final digit for a leftover carry
        (``9999 + 2 = 10001``).
        """
        if not isinstance(other, DigitList):
            raise TypeError(f"other must be a DigitList, got {type(other).__name__}")
        result: list[int] = []
        carry = 0
        for a, b in itertools.zip_longest(self._digits, other._digits, fillvalue=0):
            carry, digit = divmod(a + b + carry, 10)
            result.append(digit)
        if carry:
            result.append(carry)
        return DigitList._wrap(result)

    def multiply(
        self,
        x: int,
        strategy: MultiplyStrategy | str = MultiplyStrategy.SCHOOLBOOK,
    ) -> DigitList:
        """Return ``self * x`` as a new DigitList.

        Args:
            x: Non-negative multiplier.
            strategy: ``schoolbook`` (one pass with carry) or
                ``repeated-addition`` (``x`` calls to :meth:`add`).

        Raises:
            NegativeArgumentError: If ``x < 0``.
            TypeError: If ``x`` is not an ``int``.
        """
        check_count("x", x)
        strategy = MultiplyStrategy(strategy)
        if x == 0 or self.is_zero():
            return DigitList()
        if strategy is MultiplyStrategy.REPEATED_ADDITION:
            return self._multiply_repeated(x)
        return self._multiply_schoolbook(x)

    def _multiply_schoolbook(self, x: int) -> DigitList:
        # Carry can exceed 9 because x is unbounded; drain it digit by digit.
        result: list[int] = []
        carry = 0
        for d in self._digits:
            carry, digit = divmod(d * x + carry, 10)
            result.append(digit)
        while carry:
            carry, digit = divmod(carry, 10)
            result.append(digit)
        return DigitList._wrap(result)

    def _multiply_repeated(self, x: int) -> DigitList:
        addend = self.copy()
        result = DigitList()
        for _ in range(x):
            result = result.add(addend)
        return result

    def __add__(self, other: object) -> DigitList:
        if not isinstance(other, DigitList):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: object) -> DigitList:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__


# --- Derived operations ---


def factorial(
    n: int,
    strategy: MultiplyStrategy | str = MultiplyStrategy.SCHOOLBOOK,
) -> DigitList:
    """``n!`` built as ``1 * 1 * 2 * ... * n``. ``factorial(0)`` is 1."""
    check_count("n", n)
    result = DigitList("1")
    for k in range(1, n + 1):
        result = result.multiply(k, strategy)
    return result


def power(
    x: int,
    y: int,
    strategy: MultiplyStrategy | str = MultiplyStrategy.SCHOOLBOOK,
) -> DigitList:
    """``x ** y`` by ``y`` successive multiplications. ``power(x, 0)`` is 1, including x = 0."""
    check_count("x", x)
    check_count("y", y)
    result = DigitList("1")
    for _ in range(y):
        result = result.multiply(x, strategy)
    return result

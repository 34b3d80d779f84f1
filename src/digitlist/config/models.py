"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, digitlist.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from digitlist.domain.types import MultiplyStrategy

# --- digitlist.toml sections ---


class ArithmeticConfig(BaseModel):
    """[arithmetic] section."""

    model_config = {"frozen": True}

    multiply_strategy: MultiplyStrategy = MultiplyStrategy.SCHOOLBOOK


class LimitsConfig(BaseModel):
    """[limits] section.

    Machine-integer arguments (multiplier, factorial n, exponent, scale
    count) above ``max_argument`` are refused before any work starts.
    Repeated addition costs one full addition per unit of the multiplier,
    so it gets its own, tighter ceiling.

    The ceilings bound argument size, not running time: ``factorial 10000``
    is accepted and still takes tens of seconds.
    """

    model_config = {"frozen": True}

    max_argument: int = Field(default=10_000, ge=0)
    max_repeated_addition: int = Field(default=1_000, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    max_digits_shown: int = Field(default=2_000, ge=1)


class DigitConfig(BaseModel):
    """Shape of a whole digitlist.toml file, used to vet it before merging."""

    model_config = {"frozen": True, "extra": "forbid"}

    arithmetic: ArithmeticConfig = Field(default_factory=ArithmeticConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

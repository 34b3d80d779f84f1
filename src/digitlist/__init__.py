"""digitlist — arbitrary-precision non-negative integers on a list of decimal digits."""

__version__ = "0.1.0"

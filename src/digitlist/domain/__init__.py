"""Domain layer — the DigitList value type, its errors, and enums.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""

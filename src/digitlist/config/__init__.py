"""Configuration layer — TOML discovery, pydantic settings, and logging setup."""

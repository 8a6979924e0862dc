"""Configuration layer: TOML discovery, pydantic settings, structlog setup."""

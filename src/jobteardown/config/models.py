"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, jobteardown.toml only contains
overrides. An empty file leaves the fixed fallback job in charge.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class TeardownConfig(BaseModel):
    """[teardown] section.

    ``tear_down_job`` is the global default teardown job. The host's own
    field name ``tearDownJob`` is accepted as an alias.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    tear_down_job: str | None = Field(default=None, alias="tearDownJob")

    @field_validator("tear_down_job")
    @classmethod
    def _strip(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    json_lines: bool = False


class JobTeardownConfig(BaseModel):
    """Root model for a parsed jobteardown.toml."""

    model_config = {"frozen": True}

    teardown: TeardownConfig = Field(default_factory=TeardownConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

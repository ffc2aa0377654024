"""Environment-backed settings primitives for :mod:`sigcore`."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["SigcoreSettings", "get_settings"]

_DEFAULT_LOG_LEVEL = "WARNING"


class SigcoreSettings(BaseSettings):
    """Expose environment-derived configuration knobs for the signing core.

    Only logging is configurable. The cryptographic behaviour (algorithm,
    DER headers, signature encoding) is fixed.

    Attributes:
        log_level: Level name applied to the ``sigcore`` logger.
        json_logs: Emit JSON log lines instead of plain text.
        trace_id: Static trace identifier attached to JSON log lines. A random
            identifier is generated when unset.
    """

    log_level: str = Field(default=_DEFAULT_LOG_LEVEL, alias="SIGCORE_LOG_LEVEL")
    json_logs: bool = Field(default=False, alias="SIGCORE_JSON_LOGS")
    trace_id: str | None = Field(default=None, alias="SIGCORE_TRACE_ID")

    model_config = SettingsConfigDict(
        env_file=None, extra="ignore", populate_by_name=True
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, value: object) -> str:
        """Normalise the level name, falling back to the default when unknown.

        Args:
            value: Raw environment value.

        Returns:
            Upper-cased level name known to :mod:`logging`.
        """

        if not isinstance(value, str):
            return _DEFAULT_LOG_LEVEL
        candidate = value.strip().upper()
        if isinstance(logging.getLevelName(candidate), int):
            return candidate
        return _DEFAULT_LOG_LEVEL

    @field_validator("trace_id", mode="before")
    @classmethod
    def _parse_trace_id(cls, value: object) -> str | None:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @property
    def log_level_number(self) -> int:
        """Return the numeric logging level."""

        return logging.getLevelName(self.log_level)


def get_settings() -> SigcoreSettings:
    """Return a :class:`SigcoreSettings` instance.

    Returns:
        Settings parsed from environment variables.
    """

    return SigcoreSettings()

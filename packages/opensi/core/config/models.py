"""Configuration models for OpenSI core."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file path (stdout when unset)")


class ArchiveConfig(BaseModel):
    """Settings applied when writing SIQ containers."""

    compression_level: int = Field(
        default=6, ge=0, le=9, description="Deflate level for every saved member"
    )


class CoreConfig(BaseModel):
    """Top-level configuration for the package core."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    archive: ArchiveConfig = ArchiveConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for core config."""
        return Path("opensi.yaml")

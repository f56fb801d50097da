"""
Pin Run Configuration
=====================

A single explicit configuration value built once at startup and threaded
through the pipeline. The quiet flag lives here rather than in module state;
the CLI uses it to pick the reporter implementation.

Usage:
    from duopin.config import PinConfig

    config = PinConfig(root=Path.cwd(), quiet=True)
    config.manifest_path  # <root>/components/duo.json
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_INDENT, LOCKFILE_NAME, MANIFEST_NAME, REMOTE_PREFIX


class PinConfig(BaseModel):
    """Settings for one pin run."""

    root: Path = Field(default_factory=Path.cwd)
    manifest_name: str = MANIFEST_NAME
    lockfile_name: str = LOCKFILE_NAME
    remote_prefix: str = REMOTE_PREFIX
    quiet: bool = False
    verbose: bool = False
    indent: int = DEFAULT_INDENT

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("remote_prefix", "manifest_name", "lockfile_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only values"""
        if not v or not v.strip():
            raise ValueError("value cannot be empty")
        return v

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"indent must be non-negative, got {v}")
        return v

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest_name

    @property
    def lockfile_path(self) -> Path:
        return self.root / self.lockfile_name

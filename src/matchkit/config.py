from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

from matchkit.matchers import MATCHERS


class MessageConfig(BaseModel):
    """Limits applied when values are rendered into failure messages."""

    model_config = ConfigDict(extra="forbid")
    max_string: int = 80
    max_level: int = 6
    max_items: int = 10

    @field_validator("max_string", "max_level", "max_items")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("message limits must be at least 1")
        return v


class MatchkitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    close_to_precision: int = 2
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_matchers: list[str] = []
    message: MessageConfig = MessageConfig()

    @field_validator("close_to_precision")
    @classmethod
    def precision_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("close_to_precision must not be negative")
        return v

    @field_validator("log_matchers")
    @classmethod
    def matchers_must_exist(cls, v: list[str]) -> list[str]:
        unknown = [name for name in v if name not in MATCHERS]
        if unknown:
            raise ValueError(
                f"Unknown matchers in log_matchers: {unknown}. Available: {sorted(MATCHERS)}"
            )
        return v


_active = MatchkitConfig()


def get_config() -> MatchkitConfig:
    return _active


def set_config(config: MatchkitConfig) -> MatchkitConfig:
    """Install *config* as the active configuration and return the previous one."""
    global _active
    previous = _active
    _active = config
    return previous


def load_config(path: Path) -> MatchkitConfig:
    """Load and validate a matchkit config from a YAML file.

    ``${VAR}`` and ``${VAR:-default}`` references are expanded from the
    environment before parsing. A reference to an unset variable without a
    default raises ValueError.
    """
    text = Path(path).read_text()
    try:
        expanded = expandvars(text, nounset=True)
    except Exception as e:
        # expandvars signals unset variables with its own exception types
        raise ValueError(f"Config {path} references a missing environment variable: {e}") from e

    raw = yaml.safe_load(expanded) or {}
    return MatchkitConfig(**raw)

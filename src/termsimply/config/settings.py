"""Interpreter settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_DEPTH_LIMIT = 10_000


class EvalSettings(BaseSettings):
    """Evaluator settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TERMSIMPLY_EVAL_",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    # None disables the budget; the host stack still bounds evaluation
    max_depth: int | None = Field(default=300, ge=1, le=MAX_DEPTH_LIMIT)
    int_width: int | None = Field(default=None, ge=2)

    def int_bounds(self) -> tuple[int, int] | None:
        if self.int_width is None:
            return None
        half = 1 << (self.int_width - 1)
        return -half, half - 1


class LogSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TERMSIMPLY_LOG_",
        case_sensitive=False,
        extra="ignore",
    )

    filter: str = Field(default="info")


class Settings(BaseModel):
    """Unified settings - composition of all component settings.

    Each component reads its own environment prefix.
    """

    eval: EvalSettings = Field(default_factory=EvalSettings)
    log: LogSettings = Field(default_factory=LogSettings)


def load_settings(**eval_overrides: Any) -> Settings:
    """Load unified settings, with evaluator keyword overrides taking precedence."""
    return Settings(eval=EvalSettings(**eval_overrides))

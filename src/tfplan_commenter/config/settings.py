"""Commenter settings models."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "TFPLAN_"
LOG_ENV_VAR = f"{ENV_PREFIX}LOG"


class CommenterSettings(BaseSettings):
    """Output and discovery settings.

    Fields can be set via a YAML settings file (constructor kwargs) or
    environment variables with the ``TFPLAN_`` prefix.  Constructor kwargs take
    precedence.
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="forbid")

    output: Path = Path("terraform-plan-comment.md")
    plan_filename: str = "tfplan.json"
    max_listed: int = Field(default=3, ge=1)


class LoggingSettings(BaseSettings):
    """Log level requested through ``TFPLAN_LOG``; empty when unset."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    log: str = ""

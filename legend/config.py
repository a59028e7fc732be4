"""Helpers for loading roller configuration from the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

ENV_VARS = {
    "trance": "LEGEND_TRANCE",
    "seed": "LEGEND_SEED",
    "log_level": "LEGEND_LOG_LEVEL",
}


def load_env() -> None:
    """Load environment variables from .env files without overriding process env."""

    cwd = Path.cwd()

    base = find_dotenv(".env", usecwd=True)
    if base:
        load_dotenv(base, override=False)

    local_file = cwd / ".env.local"
    if local_file.exists():
        load_dotenv(local_file, override=False)

    if os.getenv("PYTEST_CURRENT_TEST"):
        test_file = cwd / ".env.test"
        if test_file.exists():
            load_dotenv(test_file, override=False)


class Settings(BaseModel):
    trance: bool = False
    seed: Optional[int] = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``LEGEND_*`` variables.

    Empty variables count as unset. Raises ``pydantic.ValidationError`` on
    values that do not convert.
    """
    env = os.environ if environ is None else environ
    data = {}
    for field, var in ENV_VARS.items():
        value = env.get(var, "").strip()
        if value:
            data[field] = value
    return Settings.model_validate(data)


__all__ = ["ENV_VARS", "Settings", "load_env", "load_settings"]

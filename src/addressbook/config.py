"""Settings read from the environment (optionally populated from a .env file)."""

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

ENV_STORAGE_PATH = "ADDRESSBOOK_FILE"
ENV_ACCEPTED_SUFFIXES = "ADDRESSBOOK_SUFFIXES"
ENV_LOG_LEVEL = "LOG_LEVEL"

DEFAULT_STORAGE_PATH = "addressbook.txt"
DEFAULT_ACCEPTED_SUFFIXES = ".txt"
DEFAULT_LOG_LEVEL = "WARNING"

# Accept any file suffix.
ANY_SUFFIX = "*"


class Settings(BaseModel):
    storage_path: str = DEFAULT_STORAGE_PATH
    accepted_suffixes: tuple[str, ...] | None = (DEFAULT_ACCEPTED_SUFFIXES,)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("storage_path")
    @classmethod
    def _storage_path_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{ENV_STORAGE_PATH} must not be empty")
        return value

    @field_validator("accepted_suffixes")
    @classmethod
    def _normalize_suffixes(cls, value: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if value is None:
            return None
        out = []
        for suffix in value:
            suffix = suffix.strip().lower()
            if not suffix:
                continue
            out.append(suffix if suffix.startswith(".") else f".{suffix}")
        if not out:
            raise ValueError(
                f"{ENV_ACCEPTED_SUFFIXES} must name at least one suffix, or '{ANY_SUFFIX}' for any"
            )
        return tuple(out)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper() or DEFAULT_LOG_LEVEL


def load_env_file(*candidates: Path) -> Path | None:
    """Load the first existing .env among candidates. Returns the loaded path, if any."""
    for path in candidates:
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ (defaults to os.environ)."""
    env = os.environ if environ is None else environ
    raw_suffixes = env.get(ENV_ACCEPTED_SUFFIXES, DEFAULT_ACCEPTED_SUFFIXES).strip()
    suffixes = None if raw_suffixes == ANY_SUFFIX else tuple(raw_suffixes.split(","))
    return Settings(
        storage_path=env.get(ENV_STORAGE_PATH, DEFAULT_STORAGE_PATH),
        accepted_suffixes=suffixes,
        log_level=env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
    )

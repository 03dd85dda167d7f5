"""Runtime settings read from the environment (and .env, when present)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_REGION = "SG"
DEFAULT_LOG_LEVEL = "INFO"


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def load_env() -> None:
    """Load .env from repo root or current dir, first one found wins."""
    for path in (_repo_root() / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    default_region: str = DEFAULT_REGION
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        region = os.environ.get("EDUTRACK_DEFAULT_REGION", "").strip().upper()
        level = os.environ.get("EDUTRACK_LOG_LEVEL", "").strip().upper()
        return cls(
            default_region=region or DEFAULT_REGION,
            log_level=level or DEFAULT_LOG_LEVEL,
        )

"""
Runtime configuration for the plant analysis service.

Values come from the process environment (a local `.env` file is loaded
first, if present). Unknown variables are ignored.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from models.gemini import DEFAULT_MODEL

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


@dataclass
class Settings:
    """
    Server settings. Each field can be overridden by the environment
    variable named in `_ENV_VARS`.
    """

    host: str = "0.0.0.0"
    port: int = 3690

    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL

    # Scratch directory for multipart uploads
    upload_dir: str = "upload"
    public_dir: str = field(default_factory=lambda: str(_PROJECT_ROOT / "public"))

    # Failed requests leave their upload on disk unless this is set
    cleanup_on_error: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        settings = cls()
        for field_name, (env_key, convert) in _ENV_VARS.items():
            value = os.environ.get(env_key)
            if value is not None:
                setattr(settings, field_name, convert(value))
        return settings


_ENV_VARS = {
    "host": ("HOST", str),
    "port": ("PORT", int),
    "gemini_api_key": ("GEMINI_API_KEY", str),
    "gemini_model": ("GEMINI_MODEL", str),
    "upload_dir": ("UPLOAD_DIR", str),
    "public_dir": ("PUBLIC_DIR", str),
    "cleanup_on_error": ("CLEANUP_ON_ERROR", _env_flag),
}

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Returns the singleton Settings, loading `.env` on first call."""
    global _settings

    if _settings is None:
        load_dotenv()
        _settings = Settings.from_env()

    return _settings

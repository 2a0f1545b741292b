"""
Application settings and configuration
"""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

TRUE_VALUES = ("true", "1", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


def _env_port(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 < port < 65536:
        raise ValueError(f"{name} must be between 1 and 65535, got {port}")
    return port


class Settings:
    """Runtime configuration read from the environment (and .env)"""

    def __init__(self, **overrides):
        # Application
        self.APP_NAME = os.getenv("APP_NAME", "Contact Form API")
        self.VERSION = "1.0.0"
        self.DEBUG = _env_flag("DEBUG", False)
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = _env_port("PORT", 3000)

        # Storage
        self.DATA_FILE = Path(os.getenv("DATA_FILE", os.path.join(os.getcwd(), "submissions.json")))

        # Behaviour
        self.STRICT_VALIDATION = _env_flag("STRICT_VALIDATION", False)
        self.EXPOSE_SUBMISSIONS = _env_flag("EXPOSE_SUBMISSIONS", True)

        # Optional static site (contact page)
        static_dir = os.getenv("STATIC_DIR")
        self.STATIC_DIR: Optional[Path] = Path(static_dir) if static_dir else None

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            if key in ("DATA_FILE", "STATIC_DIR") and value is not None:
                value = Path(value)
            setattr(self, key, value)

    def __repr__(self):
        return (
            f"Settings(HOST={self.HOST!r}, PORT={self.PORT}, DATA_FILE={str(self.DATA_FILE)!r}, "
            f"STRICT_VALIDATION={self.STRICT_VALIDATION}, EXPOSE_SUBMISSIONS={self.EXPOSE_SUBMISSIONS})"
        )


settings = Settings()

"""Configuration management for chatlib."""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"

if env_path.exists():
    load_dotenv(env_path)

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


class Config:
    """Application configuration loaded from environment variables."""

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # JSON Output Configuration
    JSON_INDENT: int = int(os.getenv("JSON_INDENT", "2"))
    JSON_ENSURE_ASCII: bool = _env_flag("JSON_ENSURE_ASCII")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If LOG_LEVEL is not a known logging level or
                JSON_INDENT is negative.
        """
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            msg = f"LOG_LEVEL must be a standard logging level, got {cls.LOG_LEVEL!r}"
            raise ValueError(msg)
        if cls.JSON_INDENT < 0:
            msg = f"JSON_INDENT must not be negative, got {cls.JSON_INDENT}"
            raise ValueError(msg)

    @classmethod
    def setup_logging(cls) -> None:
        """Setup basic logging configuration.

        Configure logging once at startup with console output, a simple
        format and a level taken from the environment.
        """
        logging.basicConfig(
            level=getattr(logging, cls.LOG_LEVEL, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger with the specified name.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Logger instance
        """
        return logging.getLogger(name)

    @classmethod
    def json_dump_kwargs(cls) -> dict[str, Any]:
        """Build keyword arguments for ``json.dumps`` on CLI output.

        Returns:
            Mapping with ``indent`` and ``ensure_ascii`` taken from config.
        """
        return {
            "indent": cls.JSON_INDENT or None,
            "ensure_ascii": cls.JSON_ENSURE_ASCII,
        }


config = Config()

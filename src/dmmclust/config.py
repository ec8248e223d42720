"""
Runtime settings for dmmclust.

Loads settings from environment variables (typically from a .env file).
Uses python-dotenv to load .env automatically.

Usage:
    from dmmclust.config import settings

    settings.log_level       # e.g. "INFO"
    settings.score_workers   # threads used per scoring pass

Model hyperparameters (K, alpha, beta, ...) are not settings; they are
passed explicitly through ``dmmclust.DMMConfig``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Look for .env in project root (parent of src/)
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class Settings:
    """Process-wide defaults read from the environment."""
    log_level: str = "WARNING"
    score_workers: int = 1
    default_seed: Optional[int] = None

    def __post_init__(self):
        """Normalise and validate values."""
        self.log_level = self.log_level.upper()
        if self.score_workers < 1:
            raise ValueError(
                f"score_workers must be >= 1, got {self.score_workers}. "
                f"Check DMMCLUST_SCORE_WORKERS."
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Environment variables can be set:
        1. In a .env file in the project root
        2. In the system environment

        Raises:
            ValueError: If an integer variable cannot be parsed
        """
        return cls(
            log_level=os.getenv("DMMCLUST_LOG_LEVEL", "WARNING"),
            score_workers=_env_int("DMMCLUST_SCORE_WORKERS", 1),
            default_seed=_env_int("DMMCLUST_SEED", None),
        )


# Global settings instance
settings = Settings.from_env()

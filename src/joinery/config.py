"""Settings from environment variables, with an optional .env file."""

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/joinery/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class Settings:
    """
    default_tip: tip used when a meal is created without one.
    suggested_tip_rate: fraction of the total used by new_meal_with_suggested_tip.
    """

    default_tip: float = 0.0
    suggested_tip_rate: float = 0.20
    log_level: str = "WARNING"

    def __post_init__(self):
        if not math.isfinite(self.default_tip) or self.default_tip < 0:
            raise ValueError("default_tip must be a finite, non-negative number.")
        if not math.isfinite(self.suggested_tip_rate) or self.suggested_tip_rate < 0:
            raise ValueError("suggested_tip_rate must be a finite, non-negative number.")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}.")


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {raw!r}")
    return value


def _log_level_env(name: str, default: str) -> str:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    level = raw.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def load_settings(env_file: Path | None = None) -> Settings:
    """Build Settings from JOINERY_* environment variables.

    Loads env_file if given, else the first .env found at the repo root or in
    the current directory. Variables already set in the environment win.
    """
    candidates = [env_file] if env_file is not None else [_REPO_ROOT / ".env", Path.cwd() / ".env"]
    for path in candidates:
        if path.exists():
            load_dotenv(path)
            break

    return Settings(
        default_tip=_float_env("JOINERY_DEFAULT_TIP", 0.0),
        suggested_tip_rate=_float_env("JOINERY_SUGGESTED_TIP_RATE", 0.20),
        log_level=_log_level_env("JOINERY_LOG_LEVEL", "WARNING"),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)

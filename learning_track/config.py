"""Runtime settings read from the environment (.env supported via python-dotenv)."""

import math
import os
from dataclasses import dataclass

from learning_track.catalog import DEFAULT_VARIANT

DEFAULT_ANSWER_DELAY = 1.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    variant: str = DEFAULT_VARIANT
    answer_delay: float = DEFAULT_ANSWER_DELAY
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None


def _parse_delay(raw: str) -> float:
    try:
        delay = float(raw)
    except ValueError:
        raise ValueError(f"QUIZ_ANSWER_DELAY must be a number of seconds, got '{raw}'") from None
    if not math.isfinite(delay) or delay < 0:
        raise ValueError(f"QUIZ_ANSWER_DELAY must be a finite, non-negative number, got {raw}")
    return delay


def load_settings(environ: dict | None = None) -> Settings:
    """Build Settings from QUIZ_* environment variables. Call load_dotenv() first to honour .env."""
    env = os.environ if environ is None else environ
    return Settings(
        variant=env.get("QUIZ_VARIANT", "").strip() or DEFAULT_VARIANT,
        answer_delay=_parse_delay(env.get("QUIZ_ANSWER_DELAY", str(DEFAULT_ANSWER_DELAY))),
        log_level=(env.get("QUIZ_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
        log_file=env.get("QUIZ_LOG_FILE") or None,
    )

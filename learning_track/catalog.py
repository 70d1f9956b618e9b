"""Static quiz data: question banks (quiz variants) and the course catalog."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from learning_track.tracks import Option, Question, Track
from learning_track.validation import validate_course_catalog, validate_question_bank

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_VARIANT = "classic"


class UnknownVariantError(KeyError):
    """Raised when no question bank exists for the requested variant."""


def _bank_path(variant: str) -> Path:
    return DATA_DIR / f"questions.{variant}.json"


def list_variants() -> list[str]:
    """Names of all shipped question banks, sorted."""
    return sorted(p.name.split(".")[1] for p in DATA_DIR.glob("questions.*.json"))


def load_question_bank(variant: str) -> dict:
    """
    Load and schema-validate the raw question bank for a variant.
    FAILS (raises UnknownVariantError) if no such bank is shipped.
    """
    path = _bank_path(variant)
    if not path.exists():
        raise UnknownVariantError(
            f"Unknown quiz variant '{variant}'. Available: {', '.join(list_variants())}"
        )
    data = json.loads(path.read_text(encoding="utf-8"))
    validate_question_bank(data)
    if data["variant"] != variant:
        raise ValueError(f"Question bank {path.name} declares variant '{data['variant']}'")
    return data


def build_questions(data: dict) -> tuple[Question, ...]:
    """Turn a validated question bank into immutable Question objects."""
    return tuple(
        Question(
            prompt=q["prompt"],
            options=tuple(
                Option(label=o["label"], weights={Track(k): v for k, v in o["weights"].items()})
                for o in q["options"]
            ),
        )
        for q in data["questions"]
    )


@lru_cache(maxsize=None)
def questions_of(variant: str = DEFAULT_VARIANT) -> tuple[Question, ...]:
    """Ordered questions of a quiz variant."""
    questions = build_questions(load_question_bank(variant))
    logger.debug("Loaded %d questions for variant=%s", len(questions), variant)
    return questions


@lru_cache(maxsize=1)
def _course_catalog() -> dict[Track, tuple[str, ...]]:
    data = json.loads((DATA_DIR / "courses.json").read_text(encoding="utf-8"))
    validate_course_catalog(data)
    return {Track(k): tuple(v) for k, v in data.items()}


def courses_for(track: Track) -> tuple[str, ...]:
    """Ordered course names recommended for a track."""
    return _course_catalog()[Track(track)]


def validate_all() -> list[str]:
    """
    Load every shipped question bank and the catalog, validating each.
    Returns the variant names checked. Raises on the first invalid file.
    """
    variants = list_variants()
    for variant in variants:
        load_question_bank(variant)
    _course_catalog()
    return variants

"""Learning track quiz: score multiple-choice answers and recommend a track with its courses."""

from learning_track.catalog import (
    DEFAULT_VARIANT,
    UnknownVariantError,
    courses_for,
    list_variants,
    questions_of,
)
from learning_track.scoring import ScoreTally, create_tally, fold_answer, resolve_track
from learning_track.session import (
    Active,
    Completed,
    InvalidSessionTransition,
    QuizSession,
    Recommendation,
    recommend,
)
from learning_track.tracks import TRACK_ORDER, Option, Question, Track
from learning_track.validation import validate_course_catalog, validate_question_bank

__all__ = [
    "DEFAULT_VARIANT",
    "TRACK_ORDER",
    "Active",
    "Completed",
    "InvalidSessionTransition",
    "Option",
    "Question",
    "QuizSession",
    "Recommendation",
    "ScoreTally",
    "Track",
    "UnknownVariantError",
    "courses_for",
    "create_tally",
    "fold_answer",
    "list_variants",
    "questions_of",
    "recommend",
    "resolve_track",
    "validate_course_catalog",
    "validate_question_bank",
]

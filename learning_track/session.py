"""Quiz session: drives the scoring engine one answer at a time."""

import logging
from dataclasses import dataclass

from learning_track.catalog import DEFAULT_VARIANT, courses_for, questions_of
from learning_track.scoring import ScoreTally, create_tally, fold_answer, resolve_track
from learning_track.tracks import TRACK_ORDER, Option, Question, Track

logger = logging.getLogger(__name__)


class InvalidSessionTransition(RuntimeError):
    """Raised when a session is asked to do something its current state forbids."""


@dataclass(frozen=True)
class Active:
    question_index: int


@dataclass(frozen=True)
class Completed:
    track: Track


@dataclass(frozen=True)
class Recommendation:
    variant: str
    track: Track
    courses: tuple[str, ...]
    tally: dict

    @property
    def display_name(self) -> str:
        return self.track.display_name

    def to_dict(self) -> dict:
        return {
            "variant": self.variant,
            "track": self.track.value,
            "display_name": self.display_name,
            "courses": list(self.courses),
            "tally": {t.value: self.tally[t] for t in TRACK_ORDER},
        }


class QuizSession:
    """
    One learner's pass through a question bank.

    State is Active(i) while questions remain and Completed(track) after the
    last answer. There is no way back: answers cannot be undone or replaced.
    """

    def __init__(self, variant: str = DEFAULT_VARIANT, questions: tuple[Question, ...] | None = None):
        self.variant = variant
        self.questions = tuple(questions) if questions is not None else questions_of(variant)
        if not self.questions:
            raise ValueError(f"Quiz variant '{variant}' has no questions")
        self._index = 0
        self._tally = create_tally()
        self._track: Track | None = None

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def state(self) -> Active | Completed:
        if self._track is not None:
            return Completed(self._track)
        return Active(self._index)

    @property
    def is_completed(self) -> bool:
        return self._track is not None

    @property
    def question_index(self) -> int:
        return self._index

    @property
    def answers_folded(self) -> int:
        return self._index

    @property
    def progress(self) -> float:
        """Fraction of questions answered, 0.0 to 1.0."""
        return self._index / self.total_questions

    @property
    def tally(self) -> ScoreTally:
        return dict(self._tally)

    @property
    def current_question(self) -> Question:
        if self.is_completed:
            raise InvalidSessionTransition("Quiz is already completed; there is no current question")
        return self.questions[self._index]

    def _select(self, choice: int | Option | None) -> Option:
        question = self.current_question
        if choice is None:
            raise InvalidSessionTransition(
                f"No option selected for question {self._index + 1}; an answer is required to advance"
            )
        if isinstance(choice, Option):
            if choice not in question.options:
                raise InvalidSessionTransition(
                    f"Option '{choice.label}' does not belong to question {self._index + 1}"
                )
            return choice
        if isinstance(choice, bool) or not 0 <= choice < len(question.options):
            raise InvalidSessionTransition(
                f"Option index {choice!r} out of range for question {self._index + 1} "
                f"({len(question.options)} options)"
            )
        return question.options[choice]

    def answer(self, choice: int | Option | None) -> Active | Completed:
        """
        Fold the selected option (0-based index or the Option itself) for the
        current question and advance. Returns the new state.
        """
        if self.is_completed:
            raise InvalidSessionTransition("Quiz is already completed; no further answers are accepted")
        option = self._select(choice)

        self._tally = fold_answer(self._tally, option)
        self._index += 1
        logger.debug("variant=%s answered %d/%d: %s", self.variant, self._index, self.total_questions, option.label)

        if self._index == self.total_questions:
            self._track = resolve_track(self._tally)
            logger.debug("variant=%s resolved track=%s tally=%s", self.variant, self._track.value, self._tally)
        return self.state

    def recommendation(self) -> Recommendation:
        if not self.is_completed:
            raise InvalidSessionTransition(
                f"Quiz not completed: {self._index} of {self.total_questions} questions answered"
            )
        return Recommendation(
            variant=self.variant,
            track=self._track,
            courses=courses_for(self._track),
            tally=dict(self._tally),
        )


def recommend(answers: list[int], variant: str = DEFAULT_VARIANT) -> Recommendation:
    """Run a whole session from 0-based option indices, one per question."""
    session = QuizSession(variant)
    if len(answers) != session.total_questions:
        raise InvalidSessionTransition(
            f"Expected {session.total_questions} answers for variant '{variant}', got {len(answers)}"
        )
    for choice in answers:
        session.answer(choice)
    return session.recommendation()

"""Interactive terminal quiz: the presentation layer around QuizSession."""

import logging
from typing import Callable

from learning_track import QuizSession, Recommendation
from quiz_console.pacing import Pacer

log = logging.getLogger("learning_track.console")

CLOSING_MESSAGE = (
    "Excited to see your progress on this learning journey!\n"
    "Every step is crucial to your success."
)


def render_question(session: QuizSession) -> str:
    question = session.current_question
    lines = [
        f"Question {session.question_index + 1} of {session.total_questions} "
        f"[{session.progress * 100:.0f}%]",
        question.prompt,
    ]
    for i, option in enumerate(question.options, start=1):
        lines.append(f"  {i}. {option.label}")
    return "\n".join(lines)


def render_recommendation(rec: Recommendation) -> str:
    lines = ["=== Your Learning Journey ===", f"Recommended track: {rec.display_name}", ""]
    for i, course in enumerate(rec.courses, start=1):
        lines.append(f"  {i}. {course}")
        lines.append(f"     This course is essential for your {rec.track.value} journey.")
    lines.extend(["", CLOSING_MESSAGE])
    return "\n".join(lines)


def parse_choice(raw: str, option_count: int) -> int | None:
    """1-based user entry -> 0-based option index, or None if not a valid selection."""
    try:
        choice = int((raw or "").strip()) - 1
    except ValueError:
        return None
    if not 0 <= choice < option_count:
        return None
    return choice


def run_interactive(
    session: QuizSession,
    pacer: Pacer,
    read: Callable[[str], str] | None = None,
    out: Callable[[str], None] = print,
) -> Recommendation:
    """
    Ask every question until the session completes. Invalid or empty entries
    are rejected with a message and the same question is asked again.
    """
    if read is None:
        read = input
    while not session.is_completed:
        out(render_question(session))
        option_count = len(session.current_question.options)
        choice = None
        while choice is None:
            choice = parse_choice(read("Your choice: "), option_count)
            if choice is None:
                out(f"Please choose an option between 1 and {option_count}.")
        session.answer(choice)
        pacer.pause(out)
        out("")

    rec = session.recommendation()
    log.info("Quiz completed: variant=%s track=%s", rec.variant, rec.track.value)
    return rec

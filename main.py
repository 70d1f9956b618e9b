#!/usr/bin/env python3
"""CLI for the learning track quiz."""

import argparse
import json
import sys

from dotenv import load_dotenv
from jsonschema import ValidationError

from learning_track import (
    InvalidSessionTransition,
    QuizSession,
    Track,
    UnknownVariantError,
    courses_for,
    list_variants,
    recommend,
)
from learning_track.catalog import validate_all
from learning_track.config import Settings, load_settings
from quiz_console import Pacer, render_recommendation, run_interactive, setup_app_logging


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _print_recommendation(rec, as_json: bool) -> None:
    if as_json:
        print(json.dumps(rec.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_recommendation(rec))


def _parse_answers(raw: str) -> list[int]:
    """'1,3,2' -> [0, 2, 1]. Raises ValueError on blank, non-numeric or non-positive entries."""
    answers = []
    for position, part in enumerate(raw.split(","), start=1):
        part = part.strip()
        if not part:
            raise ValueError(f"no option selected for question {position}")
        value = int(part)
        if value < 1:
            raise ValueError(f"option numbers start at 1, got {value}")
        answers.append(value - 1)
    return answers


def cmd_take(args: argparse.Namespace, settings: Settings) -> None:
    """Interactive quiz in the terminal."""
    delay = settings.answer_delay if args.delay is None else args.delay
    try:
        session = QuizSession(args.variant or settings.variant)
        pacer = Pacer(delay)
    except UnknownVariantError as e:
        _fail(e.args[0])
    except ValidationError as e:
        _fail(f"Invalid quiz data: {e.message}")
    except ValueError as e:
        _fail(str(e))

    try:
        rec = run_interactive(session, pacer)
    except (EOFError, KeyboardInterrupt):
        _fail(f"Quiz aborted after {session.answers_folded} of {session.total_questions} questions")
    _print_recommendation(rec, args.json)


def cmd_score(args: argparse.Namespace, settings: Settings) -> None:
    """Non-interactive: score a full answer sequence."""
    variant = args.variant or settings.variant
    try:
        answers = _parse_answers(args.answers)
    except ValueError as e:
        _fail(f"Invalid answers '{args.answers}': {e}")

    try:
        rec = recommend(answers, variant)
    except UnknownVariantError as e:
        _fail(e.args[0])
    except InvalidSessionTransition as e:
        _fail(str(e))
    except ValidationError as e:
        _fail(f"Invalid quiz data: {e.message}")
    except ValueError as e:
        _fail(f"Invalid quiz data: {e}")
    _print_recommendation(rec, args.json)


def cmd_courses(args: argparse.Namespace, settings: Settings) -> None:
    """Print the course list of a track."""
    try:
        track = Track.parse(args.track)
    except ValueError as e:
        _fail(str(e))
    print(f"=== {track.display_name} ===")
    for i, course in enumerate(courses_for(track), start=1):
        print(f"  {i}. {course}")


def cmd_validate(args: argparse.Namespace, settings: Settings) -> None:
    """Validate every shipped question bank and the course catalog."""
    try:
        variants = validate_all()
    except (ValidationError, ValueError) as e:
        _fail(f"Invalid quiz data: {getattr(e, 'message', e)}")
    print(f"OK: {len(variants)} question bank(s) ({', '.join(variants)}) and course catalog are valid")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    try:
        settings = load_settings()
    except ValueError as e:
        _fail(str(e))
    setup_app_logging(settings.log_level, settings.log_file)

    parser = argparse.ArgumentParser(description="Recommend a learning track from a short quiz")
    sub = parser.add_subparsers(dest="command", required=True)

    # take
    p_take = sub.add_parser("take", help="Take the quiz interactively")
    p_take.add_argument("--variant", choices=list_variants(), help=f"Question bank (default: {settings.variant})")
    p_take.add_argument("--delay", type=float, help=f"Seconds to pause after each answer (default: {settings.answer_delay})")
    p_take.add_argument("--json", action="store_true", help="Output recommendation as JSON")
    p_take.set_defaults(func=cmd_take)

    # score
    p_score = sub.add_parser("score", help="Score a full answer sequence without prompting")
    p_score.add_argument("answers", help="Comma-separated option numbers (1-based), one per question, e.g. 1,3,2,2,1")
    p_score.add_argument("--variant", choices=list_variants(), help=f"Question bank (default: {settings.variant})")
    p_score.add_argument("--json", action="store_true", help="Output recommendation as JSON")
    p_score.set_defaults(func=cmd_score)

    # courses
    p_courses = sub.add_parser("courses", help="List the courses of a track")
    p_courses.add_argument("track", help="One of: " + ", ".join(t.value for t in Track))
    p_courses.set_defaults(func=cmd_courses)

    # validate
    p_validate = sub.add_parser("validate", help="Validate question banks and course catalog")
    p_validate.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)
    args.func(args, settings)


if __name__ == "__main__":
    main()

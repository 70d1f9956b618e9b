"""Schema validation for question banks and the course catalog."""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_question_bank(data: dict) -> None:
    """Validate a question bank against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("question_bank")
    jsonschema.validate(data, schema)


def validate_course_catalog(data: dict) -> None:
    """Validate course catalog against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("course_catalog")
    jsonschema.validate(data, schema)

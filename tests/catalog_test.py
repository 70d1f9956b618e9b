"""Static data: shipped question banks and course catalog load, validate and stay immutable."""

import pytest

from learning_track import Track, UnknownVariantError, courses_for, list_variants, questions_of
from learning_track.catalog import validate_all


def test_shipped_variants():
    assert list_variants() == ["alternate", "classic"]


@pytest.mark.parametrize("variant", ["classic", "alternate"])
def test_each_variant_has_five_questions(variant):
    questions = questions_of(variant)
    assert len(questions) == 5
    assert all(q.prompt and q.options for q in questions)


def test_default_variant_is_classic():
    assert questions_of() == questions_of("classic")
    assert questions_of()[0].prompt.startswith("Quando você está resolvendo um problema")


def test_classic_weights_loaded_as_tracks():
    option = questions_of("classic")[0].options[0]
    assert option.label == "Encontrar uma solução prática e rápida"
    assert dict(option.weights) == {Track.FRONTEND: 2, Track.MOBILE: 1, Track.FULLSTACK: 1}


def test_unknown_variant_raises():
    with pytest.raises(UnknownVariantError) as exc_info:
        questions_of("nope")
    assert "classic" in exc_info.value.args[0]


@pytest.mark.parametrize("track", list(Track))
def test_courses_for_every_track_non_empty(track):
    courses = courses_for(track)
    assert isinstance(courses, tuple)
    assert len(courses) > 0


def test_courses_order_preserved():
    assert courses_for(Track.MOBILE) == ("HTML5 e CSS3", "Javascript", "React Native")
    assert courses_for(Track.FULLSTACK)[-2:] == ("Docker", "Git/GitHub")


def test_courses_for_accepts_identifier():
    assert courses_for("backend") == courses_for(Track.BACKEND)


def test_validate_all_checks_every_variant():
    assert validate_all() == ["alternate", "classic"]

"""Tally folding: partial weights, no mutation, conservation over every answer sequence."""

import itertools

import pytest

from learning_track import Option, Track, create_tally, fold_answer, questions_of


def test_create_tally_all_zero():
    tally = create_tally()
    assert tally == {Track.FRONTEND: 0, Track.BACKEND: 0, Track.MOBILE: 0, Track.FULLSTACK: 0}
    assert list(tally) == list(Track)


def test_fold_partial_weights():
    """{frontend:2, fullstack:1} into the zero tally → absent tracks stay 0."""
    option = Option("Build it fast", {Track.FRONTEND: 2, Track.FULLSTACK: 1})
    result = fold_answer(create_tally(), option)
    assert result == {Track.FRONTEND: 2, Track.BACKEND: 0, Track.MOBILE: 0, Track.FULLSTACK: 1}


def test_fold_does_not_mutate_input():
    """Each call sees only the option passed; earlier options are not re-applied."""
    start = create_tally()
    first = fold_answer(start, Option("a", {Track.BACKEND: 2}))
    second = fold_answer(first, Option("b", {Track.MOBILE: 1}))

    assert start == create_tally()
    assert first == {Track.FRONTEND: 0, Track.BACKEND: 2, Track.MOBILE: 0, Track.FULLSTACK: 0}
    assert second == {Track.FRONTEND: 0, Track.BACKEND: 2, Track.MOBILE: 1, Track.FULLSTACK: 0}


def test_fold_never_decreases():
    option = Option("mixed", {Track.FRONTEND: 1, Track.MOBILE: 0})
    before = {Track.FRONTEND: 3, Track.BACKEND: 1, Track.MOBILE: 2, Track.FULLSTACK: 5}
    after = fold_answer(before, option)
    assert all(after[t] >= before[t] for t in Track)


def test_option_weights_are_read_only():
    option = Option("x", {Track.FRONTEND: 1})
    with pytest.raises(TypeError):
        option.weights[Track.BACKEND] = 3


@pytest.mark.parametrize("variant", ["classic", "alternate"])
def test_conservation_over_every_answer_sequence(variant):
    """Sum of final tally == sum of all folded options' weights."""
    questions = questions_of(variant)
    for combo in itertools.product(*(q.options for q in questions)):
        tally = create_tally()
        for option in combo:
            tally = fold_answer(tally, option)
        assert sum(tally.values()) == sum(sum(o.weights.values()) for o in combo)


def test_option_rejects_unknown_track():
    with pytest.raises(ValueError):
        Option("x", {"devops": 1})


def test_option_coerces_identifier_keys():
    option = Option("x", {"frontend": 2, Track.MOBILE: 1})
    assert dict(option.weights) == {Track.FRONTEND: 2, Track.MOBILE: 1}
    result = fold_answer(create_tally(), option)
    assert set(result) == set(Track)
    assert result[Track.FRONTEND] == 2

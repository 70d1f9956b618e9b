"""Deterministic scoring engine. Pure code, no I/O."""

from learning_track.tracks import TRACK_ORDER, Option, Track

ScoreTally = dict[Track, int]


def create_tally() -> ScoreTally:
    """Fresh tally with every track at zero."""
    return {track: 0 for track in TRACK_ORDER}


def fold_answer(tally: ScoreTally, option: Option) -> ScoreTally:
    """
    Add the chosen option's weights to a copy of the tally.
    Tracks the option does not mention keep their current total.
    The input tally is left untouched.
    """
    updated = dict(tally)
    for track, weight in option.weights.items():
        updated[track] = updated.get(track, 0) + weight
    return updated


def resolve_track(tally: ScoreTally) -> Track:
    """
    Pick the recommended track from a completed tally.

    Tie-break: a unique maximum wins; among tied tracks fullstack wins;
    otherwise the first tied track in TRACK_ORDER. Iteration always follows
    TRACK_ORDER, never the tally's own key order.
    """
    max_score = max(tally[track] for track in TRACK_ORDER)
    tied = [track for track in TRACK_ORDER if tally[track] == max_score]

    if len(tied) == 1:
        return tied[0]
    if Track.FULLSTACK in tied:
        return Track.FULLSTACK
    return tied[0]

"""Deterministic scoring engine: tally folding and track resolution."""

from learning_track.scoring.engine import ScoreTally, create_tally, fold_answer, resolve_track

__all__ = ["ScoreTally", "create_tally", "fold_answer", "resolve_track"]

"""Tracks, questions and options: the static vocabulary of the quiz."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Track(str, Enum):
    """Closed set of learning tracks. Declaration order is the tie-break order."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    MOBILE = "mobile"
    FULLSTACK = "fullstack"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: str) -> "Track":
        """Case-insensitive lookup by identifier. Raises ValueError if unknown."""
        try:
            return cls((name or "").strip().lower())
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown track '{name}'. Valid tracks: {valid}") from None


TRACK_ORDER: tuple[Track, ...] = tuple(Track)


@dataclass(frozen=True)
class Option:
    label: str
    weights: Mapping[Track, int]

    def __post_init__(self):
        # Options are shared across sessions; keep weights read-only.
        # Track(k) raises ValueError for anything outside the closed set.
        weights = {Track(k): v for k, v in self.weights.items()}
        object.__setattr__(self, "weights", MappingProxyType(weights))


@dataclass(frozen=True)
class Question:
    prompt: str
    options: tuple[Option, ...]
"""Cosmetic pacing between an answer and the next screen."""

import math
import time
from typing import Callable

PROCESSING_MESSAGE = "Processing your answer..."


class Pacer:
    """
    Pauses for a fixed delay after each answer. The sleep function is
    injectable so tests and scripted runs can skip the wait.
    """

    def __init__(self, delay: float = 1.0, sleep: Callable[[float], None] = time.sleep):
        if not math.isfinite(delay) or delay < 0:
            raise ValueError(f"delay must be a finite, non-negative number, got {delay}")
        self.delay = delay
        self._sleep = sleep

    def pause(self, out: Callable[[str], None] = print) -> None:
        if self.delay <= 0:
            return
        out(PROCESSING_MESSAGE)
        self._sleep(self.delay)

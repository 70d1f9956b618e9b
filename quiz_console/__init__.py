"""Terminal front end for the learning track quiz."""

from quiz_console.logging_setup import setup_app_logging
from quiz_console.pacing import Pacer
from quiz_console.runner import render_recommendation, run_interactive

__all__ = ["Pacer", "render_recommendation", "run_interactive", "setup_app_logging"]

"""Qt UI components for the flag quiz."""

from .dialog_helpers import show_feedback
from .main_window import FlagQuizWindow

__all__ = [
    "FlagQuizWindow",
    "show_feedback",
]

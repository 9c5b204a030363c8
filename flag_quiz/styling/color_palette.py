"""Color palette for the game screen."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GradientStop:
    """One color stop of the background gradient."""
    color: str
    position: float


class ColorPalette:
    """Centralized color definitions for the game screen."""

    # Radial background, from the top of the window outwards
    BACKGROUND_STOPS = (
        GradientStop(color="#1A3373", position=0.1),   # Navy
        GradientStop(color="#C22642", position=0.5),   # Crimson
        GradientStop(color="#E6B333", position=0.8),   # Gold
    )

    TITLE_TEXT = "#0A84FF"        # Blue
    SCORE_TEXT = "#FFFFFF"        # White

    CARD_BACKGROUND = "rgba(242, 242, 247, 0.85)"
    CARD_PROMPT_TEXT = "#6E6E73"  # Secondary gray
    CARD_TARGET_TEXT = "#1C1C1E"  # Near black

    FLAG_HOVER_BORDER = "#FFFFFF"

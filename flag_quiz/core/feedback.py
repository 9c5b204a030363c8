"""Compose the messages shown to the player after each answer."""

from __future__ import annotations

from dataclasses import dataclass

from flag_quiz.constants.ui_constants import (
    CONTINUE_BUTTON,
    CORRECT_MESSAGE_TEMPLATE,
    CORRECT_TITLE,
    GAME_OVER_MESSAGE_TEMPLATE,
    GAME_OVER_TITLE,
    RESTART_BUTTON,
    ROUND_TEMPLATE,
    SCORE_TEMPLATE,
    WRONG_MESSAGE_TEMPLATE,
    WRONG_TITLE,
)
from flag_quiz.core.models import AnswerOutcome, SessionSnapshot


@dataclass(frozen=True, slots=True)
class Feedback:
    """Title, body and dismiss button of a feedback dialog."""

    title: str
    message: str
    button_text: str


def answer_feedback(outcome: AnswerOutcome) -> Feedback:
    if outcome.is_correct:
        return Feedback(
            title=CORRECT_TITLE,
            message=CORRECT_MESSAGE_TEMPLATE.format(country=outcome.correct_country),
            button_text=CONTINUE_BUTTON,
        )
    return Feedback(
        title=WRONG_TITLE,
        message=WRONG_MESSAGE_TEMPLATE.format(
            correct=outcome.correct_country,
            chosen=outcome.chosen_country,
        ),
        button_text=CONTINUE_BUTTON,
    )


def game_over_feedback(score: int, total_rounds: int) -> Feedback:
    return Feedback(
        title=GAME_OVER_TITLE,
        message=GAME_OVER_MESSAGE_TEMPLATE.format(score=score, total=total_rounds),
        button_text=RESTART_BUTTON,
    )


def score_text(snapshot: SessionSnapshot) -> str:
    return SCORE_TEMPLATE.format(score=snapshot.score)


def outcome_score_text(outcome: AnswerOutcome) -> str:
    return SCORE_TEMPLATE.format(score=outcome.score)


def round_text(snapshot: SessionSnapshot) -> str:
    """Label for the round currently on screen, capped at the last round."""
    current = min(snapshot.rounds_played + 1, snapshot.total_rounds)
    return ROUND_TEMPLATE.format(round=current, total=snapshot.total_rounds)

"""Domain models for the flag quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SessionState(Enum):
    """Progress of a quiz session."""

    PLAYING = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class Round:
    """Three flags on screen plus the index of the one being asked for."""

    options: tuple[str, ...]
    correct_index: int

    @property
    def target_country(self) -> str:
        return self.options[self.correct_index]


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    """Result of a single answer, with the counters as they stand afterwards."""

    is_correct: bool
    choice_index: int
    correct_country: str
    chosen_country: str
    score: int
    rounds_played: int
    is_game_over: bool


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable view of a session handed to presentation layers."""

    options: tuple[str, ...]
    correct_index: int
    score: int
    rounds_played: int
    total_rounds: int
    is_game_over: bool
    last_outcome: AnswerOutcome | None = None
    round_answered: bool = False

    @property
    def target_country(self) -> str:
        return self.options[self.correct_index]

    @property
    def state(self) -> SessionState:
        return SessionState.FINISHED if self.is_game_over else SessionState.PLAYING

    @property
    def pending_outcome(self) -> AnswerOutcome | None:
        """Outcome of the round on screen once answered, until the next round starts."""
        return self.last_outcome if self.round_answered else None

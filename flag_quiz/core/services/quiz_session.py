"""Service holding the round and score state of one game of Guess the Flag."""

from __future__ import annotations

import logging
import random

from flag_quiz.constants.quiz_constants import OPTIONS_PER_ROUND, ROUNDS_PER_GAME
from flag_quiz.core.country_pool import CountryPool
from flag_quiz.core.models import AnswerOutcome, Round, SessionSnapshot, SessionState

logger = logging.getLogger(__name__)


class InvalidAnswerError(ValueError):
    """Raised when an answer does not point at one of the flags on screen."""


class GameOverError(RuntimeError):
    """Raised when an answer arrives after the final round has been played."""


class QuizSession:
    """Manages the state of a single game.

    A round is produced by ``new_round``; ``submit_answer`` scores it but does
    not move on, so the caller can show feedback first and then ask for the
    next round explicitly.
    """

    def __init__(
        self,
        pool: CountryPool | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._pool = pool if pool is not None else CountryPool.default()
        self._rng = rng if rng is not None else random.Random()
        self._score: int = 0
        self._rounds_played: int = 0
        self._is_game_over: bool = False
        self._last_outcome: AnswerOutcome | None = None
        self._round_answered: bool = False
        self._round: Round
        self.new_round()

    # --- Read-only state ---

    @property
    def pool(self) -> CountryPool:
        return self._pool

    @property
    def current_round(self) -> Round:
        return self._round

    @property
    def options(self) -> tuple[str, ...]:
        return self._round.options

    @property
    def correct_index(self) -> int:
        return self._round.correct_index

    @property
    def target_country(self) -> str:
        return self._round.target_country

    @property
    def score(self) -> int:
        return self._score

    @property
    def rounds_played(self) -> int:
        return self._rounds_played

    @property
    def is_game_over(self) -> bool:
        return self._is_game_over

    @property
    def state(self) -> SessionState:
        return SessionState.FINISHED if self._is_game_over else SessionState.PLAYING

    @property
    def last_outcome(self) -> AnswerOutcome | None:
        return self._last_outcome

    @property
    def round_answered(self) -> bool:
        """True once the round on screen has been answered and not yet replaced."""
        return self._round_answered

    # --- Operations ---

    def new_round(self) -> None:
        self._pool.shuffle(self._rng)
        correct_index = self._rng.randrange(OPTIONS_PER_ROUND)
        self._round = Round(
            options=self._pool.head(OPTIONS_PER_ROUND),
            correct_index=correct_index,
        )
        self._round_answered = False
        logger.debug("New round: %s (target %s)", self._round.options, self._round.target_country)

    def submit_answer(self, choice_index: int) -> AnswerOutcome:
        """Score the flag at ``choice_index`` against the current round."""
        if isinstance(choice_index, bool) or not isinstance(choice_index, int):
            raise InvalidAnswerError(f"Choice must be an integer, got {choice_index!r}.")
        if not 0 <= choice_index < len(self._round.options):
            raise InvalidAnswerError(
                f"Choice {choice_index} is out of range; expected 0 to {len(self._round.options) - 1}."
            )
        if self._is_game_over:
            raise GameOverError("The game is over; restart to play again.")

        is_correct = choice_index == self._round.correct_index
        if is_correct:
            self._score += 1

        self._rounds_played += 1
        if self._rounds_played >= ROUNDS_PER_GAME:
            self._is_game_over = True

        outcome = AnswerOutcome(
            is_correct=is_correct,
            choice_index=choice_index,
            correct_country=self._round.target_country,
            chosen_country=self._round.options[choice_index],
            score=self._score,
            rounds_played=self._rounds_played,
            is_game_over=self._is_game_over,
        )
        self._last_outcome = outcome
        self._round_answered = True
        logger.debug(
            "Answer %d for %s: %s (score %d, round %d)",
            choice_index,
            outcome.correct_country,
            "correct" if is_correct else "wrong",
            self._score,
            self._rounds_played,
        )
        if self._is_game_over:
            logger.info("Game over with score %d of %d", self._score, self._rounds_played)
        return outcome

    def restart(self) -> None:
        self._rounds_played = 0
        self._score = 0
        self._is_game_over = False
        self._last_outcome = None
        self.new_round()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            options=self._round.options,
            correct_index=self._round.correct_index,
            score=self._score,
            rounds_played=self._rounds_played,
            total_rounds=ROUNDS_PER_GAME,
            is_game_over=self._is_game_over,
            last_outcome=self._last_outcome,
            round_answered=self._round_answered,
        )

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

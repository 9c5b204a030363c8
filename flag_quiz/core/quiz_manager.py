"""Thread-safe facade over a quiz session for hosts that serve it from several threads."""

from __future__ import annotations

import random
from threading import Lock

from flag_quiz.core.country_pool import CountryPool
from flag_quiz.core.models import AnswerOutcome, SessionSnapshot
from flag_quiz.core.services.quiz_session import QuizSession


class QuizManager:
    """Serializes access to one QuizSession."""

    def __init__(
        self,
        pool: CountryPool | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._lock = Lock()
        self._session = QuizSession(pool=pool, rng=rng)

    # --- Game Session Delegation ---

    def new_round(self) -> SessionSnapshot:
        with self._lock:
            self._session.new_round()
            return self._session.snapshot()

    def submit_answer(self, choice_index: int) -> AnswerOutcome:
        with self._lock:
            return self._session.submit_answer(choice_index)

    def advance(self) -> SessionSnapshot:
        """Move on after feedback.

        Only an answered round is replaced, so a repeated call cannot skip an
        unanswered one; a finished game stays finished until restarted.
        """
        with self._lock:
            if self._session.round_answered and not self._session.is_game_over:
                self._session.new_round()
            return self._session.snapshot()

    def restart(self) -> SessionSnapshot:
        with self._lock:
            self._session.restart()
            return self._session.snapshot()

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._session.snapshot()

    def is_known_country(self, country: str) -> bool:
        with self._lock:
            return country in self._session.pool

    # --- Settings ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._session.set_shuffle_seed(seed)

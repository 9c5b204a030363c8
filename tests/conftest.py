"""Shared fixtures for the flag quiz tests."""

import random

import pytest

from flag_quiz.core.country_pool import CountryPool
from flag_quiz.core.services.quiz_session import QuizSession


class FixedRandom(random.Random):
    """Random source that never reorders and always picks the same index."""

    def __init__(self, index: int = 0):
        super().__init__(0)
        self.index = index
        self.shuffles = 0

    def shuffle(self, x):
        self.shuffles += 1

    def randrange(self, *args, **kwargs):
        return self.index


@pytest.fixture
def fixed_rng():
    return FixedRandom(1)


@pytest.fixture
def pool():
    return CountryPool(["A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K"])


@pytest.fixture
def session(pool, fixed_rng):
    return QuizSession(pool=pool, rng=fixed_rng)

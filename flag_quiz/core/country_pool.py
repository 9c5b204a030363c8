"""Fixed pool of countries whose flags can appear in a round."""

from __future__ import annotations

import random
from collections.abc import Iterable

from flag_quiz.constants.quiz_constants import COUNTRIES, OPTIONS_PER_ROUND


class CountryPool:
    """Holds the candidate countries; only their order ever changes."""

    def __init__(self, names: Iterable[str]):
        cleaned = [name.strip() for name in names]
        if not cleaned:
            raise ValueError("Country pool cannot be empty.")
        if any(not name for name in cleaned):
            raise ValueError("Country names cannot be blank.")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("Country names must be unique.")
        if len(cleaned) < OPTIONS_PER_ROUND:
            raise ValueError(
                f"Country pool needs at least {OPTIONS_PER_ROUND} countries, got {len(cleaned)}."
            )
        self._names = cleaned
        self._members = frozenset(cleaned)

    @classmethod
    def default(cls) -> "CountryPool":
        return cls(COUNTRIES)

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self._names)

    def head(self, count: int) -> tuple[str, ...]:
        """Return the first ``count`` countries in the current order."""
        if not 0 < count <= len(self._names):
            raise ValueError(f"Cannot take {count} countries from a pool of {len(self._names)}.")
        return tuple(self._names[:count])

    @property
    def names(self) -> list[str]:
        return list(self._names)

    @property
    def members(self) -> frozenset[str]:
        return self._members

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._members

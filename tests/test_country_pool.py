"""Tests for CountryPool construction and shuffling."""

import random

import pytest

from flag_quiz.constants.quiz_constants import COUNTRIES
from flag_quiz.core.country_pool import CountryPool
from flag_quiz.core.flag_assets import flag_path


class TestConstruction:
    def test_default_pool_has_eleven_countries(self):
        pool = CountryPool.default()
        assert len(pool) == 11
        assert pool.members == frozenset(COUNTRIES)

    def test_empty_pool_rejected(self):
        with pytest.raises(ValueError):
            CountryPool([])

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            CountryPool(["France", "  ", "Italy"])

    def test_duplicates_rejected(self):
        with pytest.raises(ValueError, match="unique"):
            CountryPool(["France", "Italy", "France"])

    def test_too_small_pool_rejected(self):
        with pytest.raises(ValueError, match="at least 3"):
            CountryPool(["France", "Italy"])

    def test_names_are_stripped(self):
        pool = CountryPool([" France", "Italy ", "Spain"])
        assert pool.names == ["France", "Italy", "Spain"]


class TestShuffle:
    def test_shuffle_keeps_membership(self):
        pool = CountryPool.default()
        rng = random.Random(42)
        for _ in range(50):
            pool.shuffle(rng)
            assert len(pool) == 11
            assert set(pool.names) == set(COUNTRIES)

    def test_shuffle_changes_order_eventually(self):
        pool = CountryPool.default()
        rng = random.Random(7)
        orders = set()
        for _ in range(20):
            pool.shuffle(rng)
            orders.add(tuple(pool.names))
        assert len(orders) > 1

    def test_names_returns_copy(self):
        pool = CountryPool.default()
        names = pool.names
        names.clear()
        assert len(pool) == 11


class TestHead:
    def test_head_returns_first_entries(self):
        pool = CountryPool(["France", "Italy", "Spain", "UK"])
        assert pool.head(3) == ("France", "Italy", "Spain")

    def test_head_out_of_range(self):
        pool = CountryPool(["France", "Italy", "Spain"])
        with pytest.raises(ValueError):
            pool.head(4)
        with pytest.raises(ValueError):
            pool.head(0)

    def test_contains(self):
        pool = CountryPool.default()
        assert "Nigeria" in pool
        assert "Atlantis" not in pool


class TestFlagAssets:
    def test_every_country_has_a_flag(self):
        for country in COUNTRIES:
            path = flag_path(country)
            assert path is not None, country
            assert path.suffix == ".svg"

    def test_missing_flag(self):
        assert flag_path("Atlantis") is None
        assert flag_path("../flags/France") is None

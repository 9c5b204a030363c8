"""Tests for the QuizSession round and scoring state machine."""

import random

import pytest

from flag_quiz.constants.quiz_constants import COUNTRIES, ROUNDS_PER_GAME
from flag_quiz.core.models import SessionState
from flag_quiz.core.services.quiz_session import GameOverError, InvalidAnswerError, QuizSession


def play_rounds(session, count, choice_index=0):
    for _ in range(count):
        session.submit_answer(choice_index)
        if not session.is_game_over:
            session.new_round()


class TestInitialState:
    def test_starts_playing_with_zero_counters(self):
        session = QuizSession()
        assert session.score == 0
        assert session.rounds_played == 0
        assert session.is_game_over is False
        assert session.state is SessionState.PLAYING
        assert session.last_outcome is None

    def test_initial_round_is_valid(self):
        session = QuizSession()
        assert len(session.options) == 3
        assert len(set(session.options)) == 3
        assert set(session.options) <= set(COUNTRIES)
        assert 0 <= session.correct_index <= 2
        assert session.target_country == session.options[session.correct_index]


class TestNewRound:
    def test_options_are_first_three_of_pool(self, session):
        assert session.options == ("A", "B", "C")
        assert session.correct_index == 1
        assert session.target_country == "B"

    def test_rounds_are_valid_and_pool_unchanged(self):
        session = QuizSession(rng=random.Random(1234))
        for _ in range(200):
            session.new_round()
            assert len(session.options) == 3
            assert len(set(session.options)) == 3
            assert all(country in session.pool for country in session.options)
            assert 0 <= session.correct_index <= 2
            assert len(session.pool) == 11
            assert set(session.pool.names) == set(COUNTRIES)

    def test_options_track_pool_order(self):
        session = QuizSession(rng=random.Random(99))
        session.new_round()
        assert session.options == tuple(session.pool.names[:3])

    def test_new_round_leaves_counters_alone(self, session):
        session.submit_answer(1)
        session.new_round()
        assert session.score == 1
        assert session.rounds_played == 1

    def test_every_index_gets_picked(self):
        session = QuizSession(rng=random.Random(5))
        seen = set()
        for _ in range(100):
            session.new_round()
            seen.add(session.correct_index)
        assert seen == {0, 1, 2}

    def test_seed_makes_rounds_reproducible(self):
        first = QuizSession(rng=random.Random(2023))
        second = QuizSession(rng=random.Random(2023))
        first.set_shuffle_seed(7)
        second.set_shuffle_seed(7)
        rounds_a, rounds_b = [], []
        for _ in range(5):
            first.new_round()
            second.new_round()
            rounds_a.append(first.current_round)
            rounds_b.append(second.current_round)
        assert rounds_a == rounds_b


class TestSubmitAnswer:
    def test_correct_answer(self, session):
        outcome = session.submit_answer(1)
        assert outcome.is_correct is True
        assert outcome.correct_country == "B"
        assert outcome.chosen_country == "B"
        assert session.score == 1
        assert session.rounds_played == 1
        assert session.is_game_over is False

    def test_wrong_answer(self, session):
        outcome = session.submit_answer(2)
        assert outcome.is_correct is False
        assert outcome.correct_country == "B"
        assert outcome.chosen_country == "C"
        assert outcome.choice_index == 2
        assert session.score == 0
        assert session.rounds_played == 1

    def test_outcome_is_remembered(self, session):
        outcome = session.submit_answer(0)
        assert session.last_outcome == outcome
        assert session.snapshot().last_outcome == outcome

    def test_submit_does_not_start_next_round(self, session):
        before = session.current_round
        session.submit_answer(0)
        assert session.current_round == before

    @pytest.mark.parametrize("choice", [-1, 3, 5, 100])
    def test_out_of_range_choice_rejected(self, session, choice):
        before = session.snapshot()
        with pytest.raises(InvalidAnswerError):
            session.submit_answer(choice)
        assert session.snapshot() == before

    @pytest.mark.parametrize("choice", [True, 1.0, "1", None])
    def test_non_integer_choice_rejected(self, session, choice):
        with pytest.raises(InvalidAnswerError):
            session.submit_answer(choice)
        assert session.rounds_played == 0

    def test_invalid_answer_is_value_error(self, session):
        with pytest.raises(ValueError):
            session.submit_answer(5)


class TestGameOver:
    def test_seventh_to_eighth_round_ends_game(self, session):
        play_rounds(session, ROUNDS_PER_GAME - 1)
        assert session.rounds_played == 7
        assert session.is_game_over is False

        outcome = session.submit_answer(2)
        assert session.rounds_played == 8
        assert session.is_game_over is True
        assert session.state is SessionState.FINISHED
        assert outcome.is_game_over is True

    def test_answer_after_game_over_rejected(self, session):
        play_rounds(session, ROUNDS_PER_GAME, choice_index=1)
        before = session.snapshot()
        with pytest.raises(GameOverError):
            session.submit_answer(1)
        assert session.snapshot() == before

    def test_perfect_game(self, session):
        play_rounds(session, ROUNDS_PER_GAME, choice_index=1)
        assert session.score == 8
        assert session.rounds_played == 8

    def test_counters_stay_ordered(self):
        rng = random.Random(31)
        session = QuizSession(rng=random.Random(17))
        while not session.is_game_over:
            session.submit_answer(rng.randrange(3))
            assert 0 <= session.score <= session.rounds_played <= ROUNDS_PER_GAME
            assert session.is_game_over == (session.rounds_played == ROUNDS_PER_GAME)
            session.new_round()


class TestRestart:
    def test_restart_after_game_over(self, session):
        play_rounds(session, ROUNDS_PER_GAME, choice_index=1)
        assert session.is_game_over

        session.restart()
        assert session.rounds_played == 0
        assert session.score == 0
        assert session.is_game_over is False
        assert session.last_outcome is None
        assert len(session.options) == 3
        assert 0 <= session.correct_index <= 2

    def test_restart_mid_game(self, session):
        play_rounds(session, 3, choice_index=1)
        session.restart()
        assert (session.score, session.rounds_played) == (0, 0)

    def test_restart_generates_new_round(self):
        session = QuizSession(rng=random.Random(8))
        rounds = set()
        for _ in range(10):
            session.restart()
            rounds.add(session.current_round)
        assert len(rounds) > 1

    def test_full_game_after_restart(self, session):
        play_rounds(session, ROUNDS_PER_GAME)
        session.restart()
        play_rounds(session, ROUNDS_PER_GAME, choice_index=1)
        assert session.score == 8
        assert session.is_game_over


class TestPendingOutcome:
    def test_fresh_round_has_no_pending_outcome(self, session):
        snapshot = session.snapshot()
        assert session.round_answered is False
        assert snapshot.pending_outcome is None

    def test_answer_is_pending_until_next_round(self, session):
        outcome = session.submit_answer(1)
        assert session.round_answered is True
        assert session.snapshot().pending_outcome == outcome

        session.new_round()
        snapshot = session.snapshot()
        assert snapshot.pending_outcome is None
        assert snapshot.last_outcome == outcome

    def test_final_answer_stays_pending(self, session):
        play_rounds(session, ROUNDS_PER_GAME, choice_index=1)
        assert session.snapshot().pending_outcome == session.last_outcome

    def test_restart_clears_pending_outcome(self, session):
        session.submit_answer(0)
        session.restart()
        assert session.round_answered is False
        assert session.snapshot().pending_outcome is None

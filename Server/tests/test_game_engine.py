"""
Tests for the guess state machine.
"""

import pytest

from wordle_engine.exceptions import WordSourceError
from wordle_engine.models.game import (
    BACKSPACE,
    ENTER,
    IGNORED,
    ClassifiedInput,
    GameStatus,
    RawKeyEvent,
)
from wordle_engine.services.game_engine import GameEngine
from wordle_engine.services.word_source import WordSource

WRONG_GUESSES = ["trace", "speed", "crate", "react", "cigar", "rebus"]


class TestNewGame:

    def test_fresh_state(self, make_game):
        engine, state = make_game("crane")
        snapshot = engine.snapshot(state)

        assert state.solution == "crane"
        assert snapshot.status == "IN_PROGRESS"
        assert snapshot.attempts == []
        assert snapshot.current_guess == ""
        assert snapshot.key_feedback == {}
        assert snapshot.attempts_remaining == 6
        assert snapshot.answer is None

    def test_solution_is_lowercased(self):
        engine = GameEngine(WordSource(["CRANE"]))
        assert engine.new_game("g").solution == "crane"

    def test_no_word_of_length_aborts(self):
        engine = GameEngine(WordSource(["crane"]), word_length=6)
        with pytest.raises(WordSourceError):
            engine.new_game("g")

    def test_games_are_isolated(self, make_game, press):
        engine, first = make_game("crane", game_id="one")
        second = engine.new_game("two")
        press(engine, first, "c", "r")
        assert engine.snapshot(second).current_guess == ""


class TestTyping:

    def test_letters_fill_buffer(self, make_game, press):
        engine, state = make_game()
        snapshot = press(engine, state, "C", "r", "a")
        assert snapshot.current_guess == "cra"

    def test_buffer_stops_at_word_length(self, make_game, press):
        engine, state = make_game()
        snapshot = press(engine, state, *"cranes")
        assert snapshot.current_guess == "crane"

    def test_backspace(self, make_game, press):
        engine, state = make_game()
        snapshot = press(engine, state, "c", "r", "Backspace")
        assert snapshot.current_guess == "c"

    def test_backspace_on_empty_buffer(self, make_game, press):
        engine, state = make_game()
        snapshot = press(engine, state, "Backspace")
        assert snapshot.current_guess == ""

    def test_modified_and_unknown_keys_do_nothing(self, make_game, press):
        engine, state = make_game()
        snapshot = press(engine, state, "c", RawKeyEvent(key="r", ctrl=True), "1", "F5",
                         RawKeyEvent(key="Enter", code="Enter", meta=True))
        assert snapshot.current_guess == "c"
        assert snapshot.message == ""

    def test_ignored_input(self, make_game):
        engine, state = make_game()
        _, snapshot = engine.apply_input(state, IGNORED)
        assert snapshot.current_guess == ""

    def test_apply_input_returns_same_state(self, make_game):
        engine, state = make_game()
        new_state, _ = engine.apply_input(state, ClassifiedInput.letter_key("a"))
        assert new_state is state


class TestValidation:

    def test_too_short(self, make_game, press):
        engine, state = make_game()
        snapshot = press(engine, state, "c", "a", "t", "Enter")

        assert snapshot.message == "Too short!"
        assert snapshot.message_kind == "ALERT"
        assert snapshot.current_guess == "cat"
        assert snapshot.attempts == []
        assert snapshot.status == "IN_PROGRESS"

    def test_empty_enter_is_too_short(self, make_game):
        engine, state = make_game()
        _, snapshot = engine.apply_input(state, ENTER)
        assert snapshot.message == "Too short!"

    def test_not_a_word(self, make_game, guess):
        engine, state = make_game()
        snapshot = guess(engine, state, "zzzzz")

        assert snapshot.message == "ZZZZZ isn't a word!"
        assert snapshot.message_kind == "ALERT"
        assert snapshot.current_guess == "zzzzz"
        assert snapshot.attempts == []
        assert snapshot.attempts_remaining == 6

    def test_alert_cleared_by_next_letter(self, make_game, press):
        engine, state = make_game()
        press(engine, state, *"zzzzz", "Enter")
        snapshot = press(engine, state, "Backspace")
        assert snapshot.message == "ZZZZZ isn't a word!"

        snapshot = press(engine, state, "e")
        assert snapshot.message == ""
        assert snapshot.message_kind == "NONE"
        assert snapshot.current_guess == "zzzze"

    def test_extended_words_are_accepted(self, make_game, guess):
        engine, state = make_game()
        snapshot = guess(engine, state, "speed")
        assert snapshot.attempts == [[("s", "ABSENT"), ("p", "ABSENT"), ("e", "PRESENT"),
                                      ("e", "ABSENT"), ("d", "ABSENT")]]


class TestSubmission:

    def test_valid_guess_is_recorded(self, make_game, guess):
        engine, state = make_game("crane")
        snapshot = guess(engine, state, "trace")

        assert snapshot.attempts == [[("t", "ABSENT"), ("r", "CORRECT"), ("a", "CORRECT"),
                                      ("c", "PRESENT"), ("e", "CORRECT")]]
        assert snapshot.current_guess == ""
        assert snapshot.status == "IN_PROGRESS"
        assert snapshot.message == ""
        assert snapshot.attempts_remaining == 5

    def test_keyboard_feedback_accumulates(self, make_game, guess):
        engine, state = make_game("crane")
        guess(engine, state, "react")  # C present
        snapshot = guess(engine, state, "cigar")  # C correct

        assert snapshot.key_feedback["c"] == "CORRECT"
        assert snapshot.key_feedback["a"] == "CORRECT"  # CIGAR only showed it as present
        assert snapshot.key_feedback["r"] == "PRESENT"
        assert snapshot.key_feedback["t"] == "ABSENT"

        # A later miss never downgrades a known letter
        snapshot = guess(engine, state, "sissy")
        assert snapshot.key_feedback["c"] == "CORRECT"
        assert snapshot.key_feedback["s"] == "ABSENT"

    def test_mixed_case_guess_wins(self, make_game, press):
        engine, state = make_game("crane")
        snapshot = press(engine, state, *"CRANE", "Enter")
        assert snapshot.won


class TestTerminalStates:

    def test_win(self, make_game, guess):
        engine, state = make_game("crane")
        guess(engine, state, "trace")
        snapshot = guess(engine, state, "crane")

        assert state.status is GameStatus.WON
        assert snapshot.won
        assert snapshot.game_over
        assert snapshot.message == "You won!"
        assert snapshot.message_kind == "WIN"
        assert snapshot.answer == "crane"
        assert [pair[1] for pair in snapshot.attempts[-1]] == ["CORRECT"] * 5

    def test_win_on_last_attempt(self, make_game, guess):
        engine, state = make_game("crane")
        for word in WRONG_GUESSES[:5]:
            guess(engine, state, word)
        snapshot = guess(engine, state, "crane")
        assert snapshot.status == "WON"
        assert len(snapshot.attempts) == 6

    def test_loss_after_max_attempts(self, make_game, guess):
        engine, state = make_game("crane")
        for word in WRONG_GUESSES[:5]:
            snapshot = guess(engine, state, word)
            assert snapshot.status == "IN_PROGRESS"

        snapshot = guess(engine, state, WRONG_GUESSES[5])
        assert state.status is GameStatus.LOST
        assert snapshot.message == "You lost!"
        assert snapshot.message_kind == "LOSS"
        assert snapshot.attempts_remaining == 0
        assert not snapshot.won
        assert snapshot.answer == "crane"

    def test_custom_attempt_limit(self, make_game, guess):
        engine, state = make_game("crane", max_attempts=2)
        guess(engine, state, "trace")
        snapshot = guess(engine, state, "speed")
        assert snapshot.status == "LOST"
        assert len(snapshot.attempts) == 2

    @pytest.mark.parametrize("ending", ["won", "lost"])
    def test_no_input_changes_a_finished_game(self, make_game, guess, press, ending):
        engine, state = make_game("crane")
        if ending == "won":
            before = guess(engine, state, "crane")
        else:
            for word in WRONG_GUESSES:
                before = guess(engine, state, word)

        after = press(engine, state, "a", "Backspace", *"trace", "Enter", "Enter")
        for action in (BACKSPACE, ENTER, ClassifiedInput.letter_key("z")):
            _, after = engine.apply_input(state, action)

        assert after == before
        assert state.buffer.text == ""

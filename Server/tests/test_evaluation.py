"""
Tests for the two-pass guess evaluation.
"""

from collections import Counter

import pytest

from wordle_engine.models.game import LetterFeedback
from wordle_engine.services.evaluation import evaluate_guess

C = LetterFeedback.CORRECT
P = LetterFeedback.PRESENT
A = LetterFeedback.ABSENT


class TestEvaluateGuess:
    """Known evaluations."""

    def test_solution_against_itself_is_all_correct(self):
        for word in ["crane", "erase", "sissy", "apple"]:
            assert evaluate_guess(word, word) == [C] * 5

    def test_trace_against_crane(self):
        # R, A and E sit in place; C is misplaced; T is not in CRANE
        assert evaluate_guess("trace", "crane") == [A, C, C, P, C]

    def test_speed_against_erase(self):
        # ERASE holds two Es, so both guessed Es are misplaced hits
        assert evaluate_guess("speed", "erase") == [P, A, P, P, A]

    def test_surplus_repeated_letter_is_absent(self):
        # CRANE holds one E: only the first guessed E is credited
        assert evaluate_guess("speed", "crane") == [A, A, P, A, A]

    def test_correct_position_takes_priority_over_earlier_present(self):
        # The E at index 4 matches; the earlier Es must not steal that occurrence
        assert evaluate_guess("eerie", "crane") == [A, A, P, A, C]

    def test_repeated_letter_with_exact_matches(self):
        assert evaluate_guess("ppppp", "apple") == [A, C, C, A, A]

    def test_no_common_letters(self):
        assert evaluate_guess("pilot", "crane") == [A] * 5

    def test_case_insensitive(self):
        assert evaluate_guess("TRACE", "crane") == evaluate_guess("trace", "CRANE")

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            evaluate_guess("cat", "crane")


class TestEvaluationProperties:
    """Invariants that hold for any guess/solution pair."""

    PAIRS = [
        ("speed", "erase"), ("eerie", "erase"), ("sissy", "assay"), ("apple", "paper"),
        ("llama", "hello"), ("geese", "sheep"), ("trace", "crane"), ("abbey", "babes"),
    ]

    @pytest.mark.parametrize("guess,solution", PAIRS)
    def test_credited_letters_never_exceed_solution_count(self, guess, solution):
        feedback = evaluate_guess(guess, solution)
        credited = Counter(
            letter for letter, status in zip(guess, feedback) if status is not A
        )
        available = Counter(solution)
        for letter, count in credited.items():
            assert count <= available[letter]

    @pytest.mark.parametrize("guess,solution", PAIRS)
    def test_exact_matches_always_correct(self, guess, solution):
        feedback = evaluate_guess(guess, solution)
        for i, (g, s) in enumerate(zip(guess, solution)):
            assert (feedback[i] is C) == (g == s)

    @pytest.mark.parametrize("guess,solution", PAIRS)
    def test_idempotent(self, guess, solution):
        assert evaluate_guess(guess, solution) == evaluate_guess(guess, solution)

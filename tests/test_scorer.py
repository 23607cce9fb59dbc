from collections import Counter

import pytest

from nulldle.models.game import LetterStatus
from nulldle.services.scorer import evaluate

C, P, A = LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT


def statuses(guess):
    return [result.status for result in guess.letters]


def test_exact_match_is_all_correct():
    assert statuses(evaluate('apple', 'apple')) == [C] * 5


def test_no_shared_letters_is_all_absent():
    assert statuses(evaluate('apple', 'zzzzz')) == [A] * 5


def test_letters_are_kept_in_order():
    guess = evaluate('house', 'world')
    assert guess.word == 'world'
    assert [result.letter for result in guess.letters] == list('world')


def test_present_and_absent():
    # w absent, o correct, r absent, l absent, d absent
    assert statuses(evaluate('house', 'world')) == [A, C, A, A, A]
    # s and e swapped
    assert statuses(evaluate('house', 'houes')) == [C, C, C, P, P]


def test_repeated_guess_letter_counts_once_against_single_target_letter():
    # target has one 'e'; the exact match at index 4 consumes it
    assert statuses(evaluate('house', 'eeeee')) == [A, A, A, A, C]
    # no exact match: only the first 'e' is present
    assert statuses(evaluate('house', 'sleep')) == [P, A, P, A, A]
    # two 'e's in the target: one correct, one present, the third absent
    assert statuses(evaluate('lever', 'eerie')) == [P, C, P, A, A]


def test_exact_match_wins_over_earlier_present():
    # 'l' at index 3 is exact; the earlier and later 'l's must not be present
    assert statuses(evaluate('world', 'lolly')) == [A, C, A, C, A]
    assert statuses(evaluate('sleep', 'lever')) == [P, P, A, C, A]


def test_repeated_letters_never_over_counted():
    target, guess = 'apple', 'ppeel'
    result = evaluate(target, guess)
    assert statuses(result) == [P, C, P, A, P]

    matched = Counter(r.letter for r in result.letters if r.status is not A)
    available = Counter(target)
    for letter, count in matched.items():
        assert count <= available[letter]


@pytest.mark.parametrize('target,guess', [
    ('apple', 'ppeel'), ('eerie', 'sleep'), ('house', 'eeeee'), ('lever', 'eerie'),
])
def test_evaluate_is_pure(target, guess):
    assert evaluate(target, guess) == evaluate(target, guess)


def test_input_is_lowercased():
    assert evaluate('HOUSE', 'House').is_correct


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        evaluate('house', 'hous')

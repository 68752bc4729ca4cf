"""Tests for engine/quiz_scoring.py."""
import pytest

from engine.quiz_scoring import score_percent, build_feedback


def test_all_correct():
    assert score_percent([0, 1, 2], [0, 1, 2]) == (100, 3)


def test_partial_rounds_half_up():
    """5/8 = 62.5% rounds to 63."""
    answers = [0] * 5 + [1] * 3
    key = [0] * 8
    assert score_percent(answers, key) == (63, 5)


def test_one_of_three():
    assert score_percent([0, 9, 9], [0, 1, 2]) == (33, 1)


def test_unanswered_counts_wrong():
    assert score_percent([None, None, 2, 3], [0, 1, 2, 3]) == (50, 2)


def test_empty_quiz_rejected():
    with pytest.raises(ValueError):
        score_percent([], [])


def test_length_mismatch_rejected():
    with pytest.raises(ValueError, match='Expected 3 answers'):
        score_percent([0, 1], [0, 1, 2])


@pytest.mark.parametrize('score,prefix', [
    (100, 'Excellent work!'),
    (90, 'Excellent work!'),
    (89, 'Good job!'),
    (70, 'Good job!'),
    (50, 'You scored 50%'),
    (10, 'You scored 10%'),
])
def test_feedback_tiers(score, prefix):
    fb = build_feedback(score, 'Hatchet')
    assert fb['summary'].startswith(prefix)
    assert 'Hatchet' in fb['summary']


def test_excellent_feedback_has_no_weaknesses():
    assert build_feedback(95, 'Wonder')['weaknesses'] == []


def test_low_feedback_suggests_easier_books():
    fb = build_feedback(30, 'Wonder')
    assert any('lower Lexile' in s for s in fb['suggestions'])


@pytest.mark.parametrize('answers,answer_key', [
    (3, [0]),
    ([0], 0),
    ((0, 1), [0, 1]),
])
def test_non_list_input_rejected(answers, answer_key):
    with pytest.raises(ValueError, match='must be lists'):
        score_percent(answers, answer_key)

"""Adaptive lexile adjustment after a book quiz.

The student's lexile moves by a bounded amount that depends on how the
book compares to the student's level and on the quiz score:

  diff     = book_lexile - current_lexile
  category = challenging (diff > 50) | easy (diff < -50) | just_right
  base     = floor((score - 50) / 10)

Strong scores on hard books earn up to +30L and weak scores on easy
books cost up to -25L. Books at the student's level move in fixed steps.
Fractional changes are floored. The final change is clamped to +/-30 and
the new lexile never goes below 0.
"""
import math

from config.settings import LEXILE_POLICY, LEXILE_DEFAULTS


def categorize(current_lexile, book_lexile, policy=LEXILE_POLICY):
    """Classify a book relative to the reader: challenging, easy or just_right."""
    diff = book_lexile - current_lexile
    if diff > policy['challenging_threshold']:
        return 'challenging'
    if diff < policy['easy_threshold']:
        return 'easy'
    return 'just_right'


def _challenging(diff, score, base, rules):
    if score >= rules['high_score']:
        return min(rules['high_cap'], abs(diff) / rules['high_divisor']), 'high'
    if score >= rules['mid_score']:
        return min(rules['mid_cap'], abs(diff) / rules['mid_divisor']), 'mid'
    return max(rules['low_floor'], base), 'low'


def _easy(score, base, rules):
    if score >= rules['high_score']:
        return min(rules['high_cap'], abs(base)), 'high'
    if score >= rules['mid_score']:
        return min(rules['mid_cap'], base), 'mid'
    return max(rules['low_floor'], base * rules['low_multiplier']), 'low'


def _just_right(score, tiers):
    for min_score, change in tiers:
        if score >= min_score:
            return change, min_score
    # Scores below every tier fall into the last one
    min_score, change = tiers[-1]
    return change, min_score


def calculate_adjustment(current_lexile, book_lexile, score_percent,
                         policy=LEXILE_POLICY):
    """Compute the lexile change for a finished quiz.

    Args:
        current_lexile: Student's lexile before the quiz.
        book_lexile: Lexile of the book the quiz covered.
        score_percent: Quiz score, 0-100. Not validated here.

    Returns dict with: new_lexile, change, reason, category.
    """
    diff = book_lexile - current_lexile
    category = categorize(current_lexile, book_lexile, policy)
    base = math.floor((score_percent - 50) / 10)

    if category == 'challenging':
        change, tier = _challenging(diff, score_percent, base, policy['challenging'])
    elif category == 'easy':
        change, tier = _easy(score_percent, base, policy['easy'])
    else:
        change, tier = _just_right(score_percent, policy['just_right'])

    cap = policy['max_change']
    change = max(-cap, min(cap, math.floor(change)))

    new_lexile = max(LEXILE_DEFAULTS['min_lexile'], current_lexile + change)

    return {
        'new_lexile': new_lexile,
        'change': change,
        'reason': policy['reasons'][(category, tier)],
        'category': category,
    }


def format_change(change):
    """'+15L', '-5L' or 'No change'."""
    if change > 0:
        return f'+{change}L'
    if change < 0:
        return f'{change}L'
    return 'No change'

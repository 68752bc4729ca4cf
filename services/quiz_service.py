"""Process quiz submissions: grade, adjust lexile, record attempt."""
import logging

from db.database import transaction
from models import student as student_model
from models import book as book_model
from models import quiz_attempt as attempt_model
from engine import lexile
from engine.quiz_scoring import score_percent, build_feedback

logger = logging.getLogger(__name__)


def _validate_score(score):
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ValueError(f'Score must be a number, got {score!r}')
    if not 0 <= score <= 100:
        raise ValueError(f'Score must be between 0 and 100, got {score}')


def _validate_id(value, name):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{name} must be an integer, got {value!r}')


def submit_quiz(student_id, book_id, answers=None, answer_key=None, score=None):
    """Grade a quiz, move the student's lexile and record the attempt.

    Pass either answers + answer_key (graded here) or a pre-computed score.

    Returns dict with: score, lexile_before, new_lexile, change,
    change_display, reason, category, feedback, attempt_id.
    """
    _validate_id(student_id, 'student_id')
    _validate_id(book_id, 'book_id')

    correct_count = total = None
    if answers is not None:
        if answer_key is None:
            raise ValueError('answers given without an answer_key')
        score, correct_count = score_percent(answers, answer_key)
        total = len(answer_key)
    elif score is None:
        raise ValueError('Either answers or score is required')
    _validate_score(score)

    # Read, adjust and write under one write lock so concurrent
    # submissions for a student apply one after another.
    with transaction() as conn:
        student = student_model.get_by_id(student_id, conn=conn)
        if not student:
            raise LookupError(f'Student {student_id} not found')
        book = book_model.get_by_id(book_id, conn=conn)
        if not book:
            raise LookupError(f'Book {book_id} not found')

        before = student['lexile_level']
        result = lexile.calculate_adjustment(before, book['lexile_level'], score)

        student_model.update_lexile(student_id, result['new_lexile'], conn=conn)
        attempt_id = attempt_model.create(
            student_id=student_id,
            book_id=book_id,
            score=score,
            correct_count=correct_count,
            total_questions=total,
            lexile_before=before,
            lexile_after=result['new_lexile'],
            lexile_change=result['change'],
            reason=result['reason'],
            conn=conn,
        )

    logger.info('Student %s scored %s%% on book %s (%sL, %s): %sL -> %sL',
                student_id, score, book_id, book['lexile_level'],
                result['category'], before, result['new_lexile'])

    return {
        'attempt_id': attempt_id,
        'student_id': student_id,
        'book_id': book_id,
        'book_title': book['title'],
        'score': score,
        'correct_count': correct_count,
        'total_questions': total,
        'lexile_before': before,
        'new_lexile': result['new_lexile'],
        'change': result['change'],
        'change_display': lexile.format_change(result['change']),
        'reason': result['reason'],
        'category': result['category'],
        'feedback': build_feedback(score, book['title']),
    }


def class_summary():
    """Roster sorted by lexile with the class average."""
    roster = student_model.get_roster()
    students = [{
        'id': s['id'],
        'name': s['name'],
        'lexile': s['lexile_level'],
        'quizzes_completed': s['quizzes_completed'],
        'average_score': (round(s['average_score'], 1)
                          if s['average_score'] is not None else None),
    } for s in roster]

    average = 0
    if students:
        average = int(sum(s['lexile'] for s in students) / len(students) + 0.5)

    return {
        'total_students': len(students),
        'average_lexile': average,
        'students': students,
    }

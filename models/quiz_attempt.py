"""CRUD for quiz_attempts table."""
from db.database import query_db, execute_db


def create(student_id, book_id, score, lexile_before, lexile_after,
           lexile_change, reason=None, correct_count=None,
           total_questions=None, conn=None):
    return execute_db(
        """INSERT INTO quiz_attempts
           (student_id, book_id, score, correct_count, total_questions,
            lexile_before, lexile_after, lexile_change, reason)
           VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
        (student_id, book_id, score, correct_count, total_questions,
         lexile_before, lexile_after, lexile_change, reason),
        conn=conn,
    )


def get_for_student(student_id, limit=30, offset=0):
    """Most recent attempts first, with book info."""
    return query_db(
        """SELECT qa.*, b.title as book_title, b.lexile_level as book_lexile
           FROM quiz_attempts qa
           JOIN books b ON qa.book_id = b.id
           WHERE qa.student_id=?
           ORDER BY qa.created_at DESC, qa.id DESC
           LIMIT ? OFFSET ?""",
        (student_id, limit, offset),
    )


def count_for_student(student_id):
    row = query_db(
        "SELECT COUNT(*) as cnt FROM quiz_attempts WHERE student_id=?",
        (student_id,), one=True,
    )
    return row['cnt'] if row else 0


def average_score(student_id):
    """Mean quiz score, or None with no attempts."""
    row = query_db(
        "SELECT AVG(score) as avg_score FROM quiz_attempts WHERE student_id=?",
        (student_id,), one=True,
    )
    return row['avg_score'] if row else None

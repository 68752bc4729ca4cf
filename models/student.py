"""CRUD for students table."""
from db.database import query_db, execute_db
from config.settings import LEXILE_DEFAULTS


def get_all():
    return query_db("SELECT * FROM students ORDER BY name")


def get_by_id(student_id, conn=None):
    return query_db("SELECT * FROM students WHERE id=?", (student_id,),
                    one=True, conn=conn)


def get_by_name(name):
    return query_db("SELECT * FROM students WHERE name=?", (name,), one=True)


def create(name, lexile_level=None):
    if lexile_level is None:
        lexile_level = LEXILE_DEFAULTS['initial_student_lexile']
    return execute_db(
        "INSERT INTO students (name, lexile_level) VALUES (?, ?)",
        (name, lexile_level),
    )


def update_lexile(student_id, lexile_level, conn=None):
    execute_db(
        "UPDATE students SET lexile_level=? WHERE id=?",
        (lexile_level, student_id), conn=conn,
    )


def get_roster():
    """All students, lowest lexile first, with quiz stats."""
    return query_db(
        """SELECT s.*,
                  COUNT(qa.id) as quizzes_completed,
                  AVG(qa.score) as average_score
           FROM students s
           LEFT JOIN quiz_attempts qa ON qa.student_id = s.id
           GROUP BY s.id
           ORDER BY s.lexile_level, s.name"""
    )

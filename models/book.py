"""CRUD for books table."""
from db.database import query_db, execute_db
from config.settings import LEXILE_DEFAULTS


def get_all():
    return query_db("SELECT * FROM books ORDER BY lexile_level, title")


def get_by_id(book_id, conn=None):
    return query_db("SELECT * FROM books WHERE id=?", (book_id,),
                    one=True, conn=conn)


def create(title, author='', lexile_level=None, genre=None, pages=None):
    if lexile_level is None:
        lexile_level = LEXILE_DEFAULTS['default_book_lexile']
    return execute_db(
        """INSERT INTO books (title, author, lexile_level, genre, pages)
           VALUES (?, ?, ?, ?, ?)""",
        (title, author, lexile_level, genre, pages),
    )


def get_recommended(lexile_level,
                    window=LEXILE_DEFAULTS['recommendation_window'],
                    limit=10):
    """Books within +/- window of a lexile, closest first."""
    return query_db(
        """SELECT * FROM books
           WHERE lexile_level BETWEEN ? AND ?
           ORDER BY ABS(lexile_level - ?), title
           LIMIT ?""",
        (lexile_level - window, lexile_level + window, lexile_level, limit),
    )

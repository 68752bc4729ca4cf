"""Book library routes."""
import logging
import sqlite3

from flask import Blueprint, request, jsonify

from models import book as book_model
from routes.params import required_text, optional_text, optional_non_negative_int

logger = logging.getLogger(__name__)

books_bp = Blueprint('books', __name__)


@books_bp.route('/')
def index():
    return jsonify({'books': book_model.get_all()})


@books_bp.route('/', methods=['POST'])
def create():
    data = request.get_json(silent=True)
    if data is None:
        data = request.form
    if not hasattr(data, 'get'):
        return jsonify({'error': 'Expected a JSON object'}), 400

    try:
        title = required_text(data, 'title')
        author = optional_text(data, 'author') or ''
        genre = optional_text(data, 'genre')
        lexile_level = optional_non_negative_int(data, 'lexile_level')
        pages = optional_non_negative_int(data, 'pages')
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    try:
        book_id = book_model.create(title, author, lexile_level, genre, pages)
    except sqlite3.IntegrityError:
        return jsonify({'error': f'{title!r} by {author!r} already exists'}), 409
    logger.info('Added book %s: %s', book_id, title)
    return jsonify(book_model.get_by_id(book_id)), 201


@books_bp.route('/<int:book_id>')
def detail(book_id):
    book = book_model.get_by_id(book_id)
    if not book:
        return jsonify({'error': 'Not found'}), 404
    return jsonify(book)

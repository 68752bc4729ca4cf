"""Student routes — roster, reading history and book recommendations."""
import logging
import sqlite3

from flask import Blueprint, request, jsonify

from models import student as student_model
from models import book as book_model
from models import quiz_attempt as attempt_model
from engine.lexile import format_change
from config.settings import LEXILE_DEFAULTS
from routes.params import required_text, optional_non_negative_int

logger = logging.getLogger(__name__)

students_bp = Blueprint('students', __name__)


@students_bp.route('/')
def index():
    return jsonify({'students': student_model.get_all()})


@students_bp.route('/', methods=['POST'])
def create():
    data = request.get_json(silent=True)
    if data is None:
        data = request.form
    if not hasattr(data, 'get'):
        return jsonify({'error': 'Expected a JSON object'}), 400

    try:
        name = required_text(data, 'name')
        lexile_level = optional_non_negative_int(data, 'lexile_level')
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    if student_model.get_by_name(name):
        return jsonify({'error': f'Student {name!r} already exists'}), 409
    try:
        student_id = student_model.create(name, lexile_level)
    except sqlite3.IntegrityError:
        # Lost a race with a concurrent create of the same name
        return jsonify({'error': f'Student {name!r} already exists'}), 409
    logger.info('Created student %s (%s)', student_id, name)
    return jsonify(student_model.get_by_id(student_id)), 201


@students_bp.route('/<int:student_id>')
def detail(student_id):
    student = student_model.get_by_id(student_id)
    if not student:
        return jsonify({'error': 'Not found'}), 404
    student['quizzes_completed'] = attempt_model.count_for_student(student_id)
    student['average_score'] = attempt_model.average_score(student_id)
    return jsonify(student)


@students_bp.route('/<int:student_id>/history')
def history(student_id):
    """Paginated quiz history, newest first."""
    student = student_model.get_by_id(student_id)
    if not student:
        return jsonify({'error': 'Not found'}), 404

    page = max(request.args.get('page', 1, type=int), 1)
    per_page = LEXILE_DEFAULTS['history_limit']
    attempts = attempt_model.get_for_student(
        student_id, limit=per_page, offset=(page - 1) * per_page,
    )
    for a in attempts:
        a['change_display'] = format_change(a['lexile_change'])

    return jsonify({
        'student': student,
        'page': page,
        'total': attempt_model.count_for_student(student_id),
        'attempts': attempts,
    })


@students_bp.route('/<int:student_id>/recommendations')
def recommendations(student_id):
    student = student_model.get_by_id(student_id)
    if not student:
        return jsonify({'error': 'Not found'}), 404
    books = book_model.get_recommended(student['lexile_level'])
    return jsonify({'lexile_level': student['lexile_level'], 'books': books})

"""Quiz routes — submit results and preview lexile changes."""
import logging
import math

from flask import Blueprint, request, jsonify

from services import quiz_service
from engine.lexile import calculate_adjustment, format_change

logger = logging.getLogger(__name__)

quiz_bp = Blueprint('quiz', __name__)


@quiz_bp.route('/submit', methods=['POST'])
def submit():
    """Grade a quiz (or take a score) and move the student's lexile.

    JSON body: student_id, book_id, and either answers + answer_key or score.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400
    if data.get('student_id') is None or data.get('book_id') is None:
        return jsonify({'error': 'student_id and book_id are required'}), 400

    try:
        result = quiz_service.submit_quiz(
            data['student_id'], data['book_id'],
            answers=data.get('answers'),
            answer_key=data.get('answer_key'),
            score=data.get('score'),
        )
    except LookupError as e:
        return jsonify({'error': str(e)}), 404
    except ValueError as e:
        logger.warning('Rejected quiz submission: %s', e)
        return jsonify({'error': str(e)}), 400
    return jsonify(result)


@quiz_bp.route('/preview')
def preview():
    """Lexile change for hypothetical inputs. Nothing is saved."""
    current = request.args.get('current', type=int)
    book = request.args.get('book', type=int)
    score = request.args.get('score', type=float)
    if current is None or book is None or score is None:
        return jsonify({'error': 'current, book and score are required numbers'}), 400
    if not math.isfinite(score):
        return jsonify({'error': 'score must be a finite number'}), 400

    result = calculate_adjustment(current, book, score)
    result['change_display'] = format_change(result['change'])
    return jsonify(result)

"""Dashboard routes — class-wide lexile overview."""
from flask import Blueprint, jsonify

from services import quiz_service

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/')
def index():
    """Students sorted by lexile with the class average."""
    return jsonify(quiz_service.class_summary())

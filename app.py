"""Lexile — Flask application entry point."""
import logging
import logging.handlers
import os
import traceback

from flask import Flask, jsonify, request as flask_request
from werkzeug.exceptions import HTTPException

from config.settings import SECRET_KEY
from db.database import init_db
from routes.students import students_bp
from routes.books import books_bp
from routes.quiz import quiz_bp
from routes.dashboard import dashboard_bp

# --- File logging with daily rotation, 3-day retention ---
LOG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'lexile_debug.log')

file_handler = logging.handlers.TimedRotatingFileHandler(
    LOG_FILE, when='midnight', backupCount=3, encoding='utf-8',
)
file_handler.setLevel(logging.DEBUG)
file_handler.setFormatter(logging.Formatter(
    '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
))

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    handlers=[logging.StreamHandler(), file_handler],
)


def create_app():
    app = Flask(__name__)
    app.secret_key = SECRET_KEY

    app.register_blueprint(students_bp, url_prefix='/students')
    app.register_blueprint(books_bp, url_prefix='/books')
    app.register_blueprint(quiz_bp, url_prefix='/quiz')
    app.register_blueprint(dashboard_bp, url_prefix='/dashboard')

    # --- Request/response logging ---
    req_logger = logging.getLogger('lexile.requests')

    @app.before_request
    def log_request():
        body = flask_request.get_json(silent=True) if flask_request.is_json else None
        req_logger.info('>>> %s %s  body=%s', flask_request.method,
                        flask_request.full_path.rstrip('?'), body)

    @app.after_request
    def log_response(response):
        req_logger.info('<<< %s %s  status=%d',
                        flask_request.method,
                        flask_request.full_path.rstrip('?'),
                        response.status_code)
        return response

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(Exception)
    def log_error(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': error.name}), error.code
        req_logger.error('!!! %s %s  EXCEPTION:\n%s',
                         flask_request.method,
                         flask_request.full_path.rstrip('?'),
                         traceback.format_exc())
        return jsonify({'error': 'Internal Server Error'}), 500

    with app.app_context():
        init_db()

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5002, threaded=True)

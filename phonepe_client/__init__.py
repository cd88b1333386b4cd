from flask import Flask, jsonify

from phonepe_client.config import config
from phonepe_client.errors import AppError, GatewayError, ValidationError
from phonepe_client.providers import PhonePeClient, HttpTransport
from phonepe_client.utils.logger import RequestLogger

__all__ = [
    'create_app',
    'PhonePeClient',
    'HttpTransport',
    'AppError',
    'GatewayError',
    'ValidationError',
]


def create_app(config_name='development'):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])

    RequestLogger(app)

    # Register blueprints
    from phonepe_client.api import register_blueprints
    register_blueprints(app)

    # Error handlers
    register_error_handlers(app)

    return app


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(GatewayError)
    def gateway_error(error):
        return jsonify({
            'success': False,
            'error': error.error,
            'code': error.code,
            'message': error.message
        }), error.status_code

    @app.errorhandler(AppError)
    def app_error(error):
        return jsonify({'success': False, 'error': error.error, 'message': error.message}), error.status_code

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({'error': 'Bad request', 'message': str(error)}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found', 'message': str(error)}), 404

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': 'Internal server error', 'message': str(error)}), 500

"""
API Blueprints Package
Registers all API blueprints
"""

from phonepe_client.api.payments import payments_bp

__all__ = [
    'payments_bp',
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app

    Args:
        app: Flask application instance
    """

    url_base : str = '/api/v1'

    app.register_blueprint(payments_bp, url_prefix=f'{url_base}/payments')

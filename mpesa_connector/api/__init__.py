"""
API Blueprints Package
Registers all API blueprints
"""

from mpesa_connector.api.buy_goods import buy_goods_bp
from mpesa_connector.api.health import health_bp

# Export blueprints
__all__ = [
    'buy_goods_bp',
    'health_bp',
    'register_blueprints'
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app

    Args:
        app: Flask application instance
    """
    app.register_blueprint(buy_goods_bp)
    app.register_blueprint(health_bp)

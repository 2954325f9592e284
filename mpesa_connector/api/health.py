"""
Health Check Endpoints
"""

from datetime import datetime, timezone

from flask import Blueprint, jsonify, current_app

from mpesa_connector.extensions import mpesa

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """
    Liveness check

    No upstream call is made; token_cached reports whether the next
    payment can skip the token endpoint.
    """
    service = mpesa.get_payment_service()

    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'service': 'mpesa-connector',
        'environment': current_app.config.get('MPESA_ENV'),
        'token_cached': service.token_store.has_valid_token(),
    }), 200

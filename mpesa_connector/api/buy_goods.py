from flask import Blueprint, request, jsonify
from marshmallow import ValidationError

from mpesa_connector.extensions import mpesa
from mpesa_connector.schemas import BuyGoodsRequestSchema
from mpesa_connector.utils.logger import get_logger

logger = get_logger(__name__)

buy_goods_bp = Blueprint('buy_goods', __name__)

buy_goods_schema = BuyGoodsRequestSchema()


@buy_goods_bp.route('/buygoods', methods=['POST'])
def buy_goods():
    """
    Initiate a buy goods payment

    Body:
        {
            "BusinessShortCode": 174379,
            "Amount": 1,
            "PartyA": 254708374149,
            "PartyB": 174379,
            "PhoneNumber": 254708374149,
            "CallBackURL": "https://mydomain.com/path",
            "AccountReference": "CompanyXLTD",
            "TransactionDesc": "Payment of X"
        }

    Returns the gateway response unchanged on success, otherwise an error
    body with 502 (no access token), 504 (gateway unreachable) or the
    gateway's own status code.
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({
            'success': False,
            'error': 'Bad request',
            'message': 'Request body must be a JSON object'
        }), 400

    try:
        payment_request = buy_goods_schema.load(body)
    except ValidationError as e:
        return jsonify({
            'success': False,
            'error': 'Validation error',
            'details': e.messages
        }), 400

    logger.info(payment_request)

    outcome = mpesa.get_payment_service().initiate(payment_request)
    payload, status_code = outcome.to_http()

    if outcome.is_json:
        return jsonify(payload), status_code
    return payload, status_code, {'Content-Type': 'text/plain; charset=utf-8'}

"""
Pytest Configuration and Fixtures
"""
import json
from decimal import Decimal
from unittest.mock import Mock

import pytest

from mpesa_connector import create_app
from mpesa_connector.models import AccessToken, PaymentRequest


def mock_http_response(json_data, status_code: int = 200) -> Mock:
    """Return a mock requests.Response whose .json() returns json_data."""
    resp = Mock()
    resp.ok = 200 <= status_code < 400
    resp.status_code = status_code
    resp.json.return_value = json_data
    resp.text = json.dumps(json_data)
    resp.headers = {"Content-Type": "application/json"}
    return resp


@pytest.fixture
def http_response():
    """Factory for mock requests.Response objects"""
    return mock_http_response


@pytest.fixture(scope='function')
def app():
    """Create application for testing"""
    app = create_app('testing')

    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture(scope='function')
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture
def buy_goods_body():
    """Inbound body as a merchant sends it"""
    return {
        "BusinessShortCode": 174379,
        "Amount": 1,
        "PartyA": 254708374149,
        "PartyB": 174379,
        "PhoneNumber": 254708374149,
        "CallBackURL": "https://mydomain.com/path",
        "AccountReference": "CompanyXLTD",
        "TransactionDesc": "Payment of X",
    }


@pytest.fixture
def payment_request():
    return PaymentRequest(
        business_short_code=174379,
        amount=Decimal("1"),
        party_a=254708374149,
        party_b=174379,
        phone_number=254708374149,
        callback_url="https://mydomain.com/path",
        account_reference="CompanyXLTD",
        transaction_desc="Payment of X",
    )


@pytest.fixture
def access_token():
    return AccessToken(value="daraja_tok_abc", expires_at=float("inf"))


@pytest.fixture
def stk_accepted_body():
    return {
        "MerchantRequestID": "29115-34620561-1",
        "CheckoutRequestID": "ws_CO_191220191020363925",
        "ResponseCode": "0",
        "ResponseDescription": "Success. Request accepted for processing",
        "CustomerMessage": "Success. Request accepted for processing",
    }

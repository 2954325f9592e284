"""
Unit Tests for the buy goods payment service
"""

import base64
from unittest.mock import Mock

import pytest

from mpesa_connector.errors import AuthUnavailable, GatewayRejected, GatewayUnreachable
from mpesa_connector.models import GatewayResponse, PaymentState
from mpesa_connector.services import PaymentService, RequestEnricher

PASSKEY = "bfb279f9aa9bdbcf158e97dd71a467cd2e0c893059b10f78e6b72ada1ed2c919"


class TestPaymentService:
    """Test cases for PaymentService"""

    @pytest.fixture
    def token_store(self, access_token):
        store = Mock()
        store.get_access_token.return_value = access_token
        return store

    @pytest.fixture
    def dispatcher(self):
        return Mock()

    @pytest.fixture
    def service(self, token_store, dispatcher):
        enricher = RequestEnricher(pass_key=PASSKEY, timestamp_provider=lambda: 20070)
        return PaymentService(token_store=token_store, enricher=enricher, dispatcher=dispatcher)

    def test_success_forwards_gateway_body(self, service, dispatcher, payment_request, stk_accepted_body):
        dispatcher.send.return_value = GatewayResponse(status_code=200, body=stk_accepted_body)

        outcome = service.initiate(payment_request)

        assert outcome.state == PaymentState.SUCCEEDED
        assert outcome.succeeded
        assert outcome.error is None
        assert outcome.to_http() == (stk_accepted_body, 200)

    def test_dispatches_enriched_request_with_token(
        self, service, dispatcher, payment_request, access_token, stk_accepted_body
    ):
        dispatcher.send.return_value = GatewayResponse(status_code=200, body=stk_accepted_body)

        service.initiate(payment_request)

        dispatcher.send.assert_called_once()
        payload, token, endpoint = dispatcher.send.call_args.args
        assert token is access_token
        assert endpoint is None
        assert payload.timestamp == 20070
        assert payload.transaction_type == "CustomerBuyGoodsOnline"
        assert base64.b64decode(payload.password).decode() == f"174379{PASSKEY}20070"

    def test_auth_failure_skips_enrichment_and_dispatch(self, token_store, dispatcher, payment_request):
        token_store.get_access_token.side_effect = AuthUnavailable("connection refused")
        enricher = Mock()
        service = PaymentService(token_store=token_store, enricher=enricher, dispatcher=dispatcher)

        outcome = service.initiate(payment_request)

        assert outcome.state == PaymentState.FAILED
        assert isinstance(outcome.error, AuthUnavailable)
        enricher.enrich.assert_not_called()
        dispatcher.send.assert_not_called()

        body, status_code = outcome.to_http()
        assert status_code == 502
        assert body["success"] is False

    def test_gateway_rejection(self, service, dispatcher, payment_request):
        dispatcher.send.side_effect = GatewayRejected(400, {"error": "invalid shortcode"})

        outcome = service.initiate(payment_request)

        assert outcome.state == PaymentState.FAILED
        assert isinstance(outcome.error, GatewayRejected)
        assert outcome.error.status_code == 400
        assert outcome.error.body == {"error": "invalid shortcode"}

        body, status_code = outcome.to_http()
        assert status_code == 400
        assert body["details"] == {"error": "invalid shortcode"}

    def test_gateway_unreachable(self, service, dispatcher, payment_request):
        dispatcher.send.side_effect = GatewayUnreachable("timed out")

        outcome = service.initiate(payment_request)

        assert outcome.state == PaymentState.FAILED
        assert outcome.to_http()[1] == 504

    def test_no_retry_on_failure(self, service, token_store, dispatcher, payment_request):
        dispatcher.send.side_effect = GatewayUnreachable("timed out")

        service.initiate(payment_request)

        assert token_store.get_access_token.call_count == 1
        assert dispatcher.send.call_count == 1

    def test_enrichment_defect_propagates(self, token_store, dispatcher, payment_request):
        enricher = Mock()
        enricher.enrich.side_effect = TypeError("bad payload")
        service = PaymentService(token_store=token_store, enricher=enricher, dispatcher=dispatcher)

        with pytest.raises(TypeError):
            service.initiate(payment_request)

        dispatcher.send.assert_not_called()

    def test_configured_endpoint_passed_to_dispatcher(self, token_store, dispatcher, payment_request):
        dispatcher.send.return_value = GatewayResponse(status_code=200, body={})
        enricher = RequestEnricher(pass_key=PASSKEY)
        service = PaymentService(
            token_store=token_store,
            enricher=enricher,
            dispatcher=dispatcher,
            endpoint="https://gateway.example.com/buygoods",
        )

        service.initiate(payment_request)

        assert dispatcher.send.call_args.args[2] == "https://gateway.example.com/buygoods"

    def test_pass_key_never_logged(self, service, dispatcher, payment_request, caplog):
        dispatcher.send.return_value = GatewayResponse(status_code=200, body={})

        with caplog.at_level("DEBUG"):
            service.initiate(payment_request)

        assert PASSKEY not in caplog.text

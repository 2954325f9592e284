from mpesa_connector.models.access_token import AccessToken
from mpesa_connector.models.payment_request import PaymentRequest, EnrichedPaymentRequest
from mpesa_connector.models.payment_outcome import PaymentState, PaymentOutcome, GatewayResponse

__all__ = [
    'AccessToken',
    'PaymentRequest',
    'EnrichedPaymentRequest',
    'PaymentState',
    'PaymentOutcome',
    'GatewayResponse',
]

from mpesa_connector.auth import AccessTokenStore
from mpesa_connector.providers import MPesaGatewayDispatcher
from mpesa_connector.services import PaymentService, RequestEnricher
from mpesa_connector.utils.credentials import get_timestamp_provider


class MPesaConnector:
    """Builds the buy goods pipeline from app config and owns its token store"""

    extension_name = 'mpesa_connector'

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        config = app.config

        token_store = AccessTokenStore(
            consumer_key=config.get('MPESA_CONSUMER_KEY'),
            consumer_secret=config.get('MPESA_CONSUMER_SECRET'),
            auth_url=config.get('MPESA_AUTH_URL'),
            timeout=config.get('MPESA_AUTH_TIMEOUT', 15),
            expiry_margin=config.get('MPESA_TOKEN_EXPIRY_MARGIN', 60),
        )
        enricher = RequestEnricher(
            pass_key=config.get('MPESA_PASSKEY'),
            transaction_type=config.get('MPESA_TRANSACTION_TYPE', 'CustomerBuyGoodsOnline'),
            timestamp_provider=get_timestamp_provider(
                config.get('MPESA_TIMESTAMP_FORMAT', 'epoch_day')
            ),
        )
        dispatcher = MPesaGatewayDispatcher(
            endpoint=config.get('MPESA_BUY_GOODS_URL'),
            timeout=config.get('MPESA_GATEWAY_TIMEOUT', 30),
        )

        app.extensions[self.extension_name] = PaymentService(
            token_store=token_store,
            enricher=enricher,
            dispatcher=dispatcher,
        )

    @classmethod
    def get_payment_service(cls, app=None) -> PaymentService:
        if app is None:
            from flask import current_app
            app = current_app
        return app.extensions[cls.extension_name]


mpesa = MPesaConnector()

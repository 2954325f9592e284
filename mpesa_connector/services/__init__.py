from mpesa_connector.services.enrichment_service import RequestEnricher, BUY_GOODS_TRANSACTION_TYPE
from mpesa_connector.services.payment_service import PaymentService

__all__ = ['RequestEnricher', 'BUY_GOODS_TRANSACTION_TYPE', 'PaymentService']

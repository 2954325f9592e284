"""
Schemas Package
Marshmallow schemas for request/response mapping
"""

from mpesa_connector.schemas.payment_schema import (
    BuyGoodsRequestSchema,
    EnrichedPaymentRequestSchema
)

__all__ = [
    'BuyGoodsRequestSchema',
    'EnrichedPaymentRequestSchema'
]

from typing import Optional

from mpesa_connector.models import AccessToken, EnrichedPaymentRequest, PaymentRequest
from mpesa_connector.utils.credentials import (
    TimestampProvider,
    epoch_day_timestamp,
    generate_password,
)

BUY_GOODS_TRANSACTION_TYPE = 'CustomerBuyGoodsOnline'


class RequestEnricher:
    """Adds Timestamp, Password and TransactionType to a payment request"""

    def __init__(
        self,
        pass_key: str,
        transaction_type: str = BUY_GOODS_TRANSACTION_TYPE,
        timestamp_provider: TimestampProvider = epoch_day_timestamp,
    ):
        if not pass_key:
            raise ValueError("RequestEnricher: 'pass_key' is required")
        self._pass_key = pass_key
        self.transaction_type = transaction_type
        self.timestamp_provider = timestamp_provider

    def enrich(
        self,
        request: PaymentRequest,
        token: AccessToken,
        timestamp_provider: Optional[TimestampProvider] = None,
    ) -> EnrichedPaymentRequest:
        """
        Build the outbound request for an authenticated payment.

        The timestamp is read once and the same value feeds both the
        password and the Timestamp field.

        Args:
            request: Validated inbound request, left untouched
            token: Token obtained for this request
            timestamp_provider: Overrides the configured provider

        Returns:
            New EnrichedPaymentRequest
        """
        if token is None:
            raise ValueError('Cannot enrich a payment request before authentication')

        timestamp = (timestamp_provider or self.timestamp_provider)()
        password = generate_password(request.business_short_code, self._pass_key, timestamp)

        return EnrichedPaymentRequest(
            business_short_code=request.business_short_code,
            amount=request.amount,
            party_a=request.party_a,
            party_b=request.party_b,
            phone_number=request.phone_number,
            callback_url=request.callback_url,
            account_reference=request.account_reference,
            transaction_desc=request.transaction_desc,
            timestamp=timestamp,
            password=password,
            transaction_type=self.transaction_type,
        )

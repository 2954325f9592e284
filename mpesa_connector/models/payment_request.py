from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PaymentRequest:
    """A validated inbound buy goods request"""
    business_short_code: int
    amount: Decimal
    party_a: int
    party_b: int
    phone_number: int
    callback_url: str
    account_reference: str
    transaction_desc: str


@dataclass(frozen=True)
class EnrichedPaymentRequest:
    """A payment request carrying the credentials the gateway expects"""
    business_short_code: int
    amount: Decimal
    party_a: int
    party_b: int
    phone_number: int
    callback_url: str
    account_reference: str
    transaction_desc: str
    timestamp: int
    password: str
    transaction_type: str

    def __repr__(self):
        return (
            f'<EnrichedPaymentRequest {self.account_reference} - '
            f'{self.business_short_code} - {self.amount}>'
        )

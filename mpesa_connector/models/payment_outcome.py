from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from mpesa_connector.errors import ConnectorError


class PaymentState(str, Enum):
    RECEIVED = 'received'
    AUTHENTICATED = 'authenticated'
    ENRICHED = 'enriched'
    DISPATCHED = 'dispatched'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


@dataclass(frozen=True)
class GatewayResponse:
    status_code: int
    body: Any
    # False when the body could not be parsed and holds the raw text
    is_json: bool = True


@dataclass(frozen=True)
class PaymentOutcome:
    """Terminal result of one buy goods initiation"""
    state: PaymentState
    response: Optional[GatewayResponse] = None
    error: Optional[ConnectorError] = None

    @property
    def succeeded(self) -> bool:
        return self.state == PaymentState.SUCCEEDED

    @classmethod
    def success(cls, response: GatewayResponse) -> 'PaymentOutcome':
        return cls(state=PaymentState.SUCCEEDED, response=response)

    @classmethod
    def failure(cls, error: ConnectorError) -> 'PaymentOutcome':
        return cls(state=PaymentState.FAILED, error=error)

    @property
    def is_json(self) -> bool:
        """Whether to_http's body should be rendered as JSON"""
        if self.succeeded:
            return self.response.is_json
        return True

    def to_http(self):
        """Return (body, status_code) for the original caller"""
        if self.succeeded:
            return self.response.body, self.response.status_code
        return self.error.to_dict(), self.error.status_code

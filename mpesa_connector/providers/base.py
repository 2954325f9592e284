from abc import ABC, abstractmethod
from typing import Optional

from mpesa_connector.models import AccessToken, EnrichedPaymentRequest, GatewayResponse


class GatewayDispatcher(ABC):
    """Abstract base class for outbound payment gateways"""

    def __init__(self, endpoint: str, timeout: float = 30):
        """
        Initialize dispatcher

        Args:
            endpoint: Default URL payloads are posted to
            timeout: Seconds to wait for the gateway
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.gateway_name = self.__class__.__name__.replace('GatewayDispatcher', '').lower()

    @abstractmethod
    def send(
            self,
            payload: EnrichedPaymentRequest,
            token: AccessToken,
            endpoint: Optional[str] = None
    ) -> GatewayResponse:
        """
        Forward an enriched payment request to the gateway, single attempt

        Args:
            payload: Enriched request
            token: Bearer token for the Authorization header
            endpoint: Overrides the configured endpoint

        Returns:
            GatewayResponse for a 2xx reply

        Raises:
            GatewayUnreachable: On connection errors or timeout
            GatewayRejected: On a non-2xx reply
        """
        pass

    def get_gateway_name(self) -> str:
        """Get gateway name"""
        return self.gateway_name

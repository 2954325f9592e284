"""
M-Pesa Buy Goods gateway
Forwards enriched Lipa na M-Pesa requests to the Daraja API.

    POST <MPESA_BUY_GOODS_URL>
        Content-Type:  application/json
        Authorization: Bearer <access token>

One attempt per call. Transport failures raise GatewayUnreachable,
non-2xx replies raise GatewayRejected with the status code and body.
"""

from typing import Any, Dict, Optional, Tuple

import requests

from mpesa_connector.errors import GatewayRejected, GatewayUnreachable
from mpesa_connector.models import AccessToken, EnrichedPaymentRequest, GatewayResponse
from mpesa_connector.providers.base import GatewayDispatcher
from mpesa_connector.schemas import EnrichedPaymentRequestSchema
from mpesa_connector.utils.logger import get_logger

logger = get_logger(__name__)

_payload_schema = EnrichedPaymentRequestSchema()


class MPesaGatewayDispatcher(GatewayDispatcher):
    """Daraja buy goods dispatcher"""

    def __init__(
        self,
        endpoint: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(endpoint, timeout)
        if not endpoint:
            raise ValueError("MPesaGatewayDispatcher: 'endpoint' is required")
        self._session = session or requests.Session()

    def send(
        self,
        payload: EnrichedPaymentRequest,
        token: AccessToken,
        endpoint: Optional[str] = None,
    ) -> GatewayResponse:
        url = endpoint or self.endpoint
        body = self.serialize(payload)

        try:
            resp = self._session.post(
                url,
                json=body,
                headers=self._headers(token),
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            raise GatewayUnreachable(
                f"M-Pesa gateway timed out after {self.timeout}s"
            ) from exc
        except requests.RequestException as exc:
            raise GatewayUnreachable(f"M-Pesa gateway network error - {exc}") from exc

        data, is_json = self._parse_body(resp)
        logger.debug("MPesa [buy_goods] HTTP %s: %s", resp.status_code, data)

        if not 200 <= resp.status_code < 300:
            raise GatewayRejected(resp.status_code, data)

        return GatewayResponse(status_code=resp.status_code, body=data, is_json=is_json)

    @staticmethod
    def serialize(payload: EnrichedPaymentRequest) -> Dict[str, Any]:
        """Map an enriched request onto Daraja field names"""
        return _payload_schema.dump(payload)

    @staticmethod
    def _headers(token: AccessToken) -> Dict[str, str]:
        return {
            "Content-Type":  "application/json",
            "Authorization": f"Bearer {token.value}",
        }

    @staticmethod
    def _parse_body(resp: requests.Response) -> Tuple[Any, bool]:
        """Return (body, is_json); non-JSON bodies come back as raw text"""
        try:
            return resp.json(), True
        except ValueError:
            return resp.text, False

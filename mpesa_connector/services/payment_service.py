from typing import Optional

from mpesa_connector.auth import AccessTokenStore
from mpesa_connector.errors import AuthUnavailable, GatewayRejected, GatewayUnreachable
from mpesa_connector.models import PaymentOutcome, PaymentRequest, PaymentState
from mpesa_connector.providers import GatewayDispatcher
from mpesa_connector.services.enrichment_service import RequestEnricher
from mpesa_connector.utils.logger import get_logger

logger = get_logger(__name__)


class PaymentService:
    """Runs a buy goods initiation: authenticate, enrich, dispatch"""

    def __init__(
        self,
        token_store: AccessTokenStore,
        enricher: RequestEnricher,
        dispatcher: GatewayDispatcher,
        endpoint: Optional[str] = None,
    ):
        self.token_store = token_store
        self.enricher = enricher
        self.dispatcher = dispatcher
        self.endpoint = endpoint

    def initiate(self, request: PaymentRequest) -> PaymentOutcome:
        """
        Initiate a buy goods payment

        Each call runs the pipeline once and ends in SUCCEEDED or FAILED.
        Connector errors become a FAILED outcome; anything else is a defect
        and propagates.

        Args:
            request: Validated inbound request

        Returns:
            PaymentOutcome
        """
        reference = request.account_reference
        self._transition(reference, PaymentState.RECEIVED)

        try:
            token = self.token_store.get_access_token()
        except AuthUnavailable as e:
            return self._fail(reference, e)
        self._transition(reference, PaymentState.AUTHENTICATED)

        enriched = self.enricher.enrich(request, token)
        self._transition(reference, PaymentState.ENRICHED)

        try:
            response = self.dispatcher.send(enriched, token, self.endpoint)
        except (GatewayRejected, GatewayUnreachable) as e:
            self._transition(reference, PaymentState.DISPATCHED)
            return self._fail(reference, e)
        self._transition(reference, PaymentState.DISPATCHED)

        self._transition(reference, PaymentState.SUCCEEDED)
        return PaymentOutcome.success(response)

    @staticmethod
    def _transition(reference: str, state: PaymentState) -> None:
        logger.info("Buy goods [%s] -> %s", reference, state.value)

    @staticmethod
    def _fail(reference: str, error) -> PaymentOutcome:
        logger.warning(
            "Buy goods [%s] -> %s: %s (%s)",
            reference, PaymentState.FAILED.value, error.error, error.message
        )
        return PaymentOutcome.failure(error)

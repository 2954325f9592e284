from mpesa_connector.providers.base import GatewayDispatcher
from mpesa_connector.providers.mpesa_gateway import MPesaGatewayDispatcher

__all__ = ['GatewayDispatcher', 'MPesaGatewayDispatcher']

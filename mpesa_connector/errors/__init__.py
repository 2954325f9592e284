from mpesa_connector.errors.exceptions import (
    AppError,
    ValidationError,
    BadRequest,
    ConnectorError,
    AuthUnavailable,
    GatewayUnreachable,
    GatewayRejected,
)

__all__= [
    'AppError',
    'ValidationError',
    'BadRequest',
    'ConnectorError',
    'AuthUnavailable',
    'GatewayUnreachable',
    'GatewayRejected',
]

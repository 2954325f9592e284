class AppError(Exception):
    status_code = 500
    error = "Application error"

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message

    def to_dict(self):
        return {'success': False, 'error': self.error, 'message': self.message}


class ValidationError(AppError):
    status_code = 400
    error = "Validation error"


class BadRequest(AppError):
    status_code = 400
    error = "Bad request"


class ConnectorError(AppError):
    """Base for failures that terminate a payment initiation"""
    status_code = 502
    error = "Connector error"


class AuthUnavailable(ConnectorError):
    status_code = 502
    error = "Access token unavailable"


class GatewayUnreachable(ConnectorError):
    status_code = 504
    error = "Payment gateway unreachable"


class GatewayRejected(ConnectorError):
    error = "Payment gateway rejected request"

    def __init__(self, status_code, body, message=None):
        super().__init__(
            message or f"Gateway responded with HTTP {status_code}",
            status_code=status_code,
        )
        self.body = body

    def to_dict(self):
        data = super().to_dict()
        data['details'] = self.body
        return data

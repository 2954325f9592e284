from mpesa_connector.auth.token_store import AccessTokenStore

__all__ = ['AccessTokenStore']

import os
from dotenv import load_dotenv

load_dotenv()

# Daraja base URLs
MPESA_BASE_URLS = {
    'sandbox':    'https://sandbox.safaricom.co.ke',
    'production': 'https://api.safaricom.co.ke',
}

_MPESA_ENV = os.getenv('MPESA_ENV', 'sandbox').lower()
_MPESA_BASE_URL = MPESA_BASE_URLS.get(_MPESA_ENV, MPESA_BASE_URLS['sandbox'])


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')

    # Daraja app credentials
    MPESA_ENV = _MPESA_ENV
    MPESA_CONSUMER_KEY = os.getenv('MPESA_CONSUMER_KEY')
    MPESA_CONSUMER_SECRET = os.getenv('MPESA_CONSUMER_SECRET')
    MPESA_PASSKEY = os.getenv('MPESA_PASSKEY')

    # Endpoints
    MPESA_AUTH_URL = os.getenv('MPESA_AUTH_URL', f'{_MPESA_BASE_URL}/oauth/v1/generate')
    MPESA_BUY_GOODS_URL = os.getenv(
        'MPESA_BUY_GOODS_URL',
        f'{_MPESA_BASE_URL}/mpesa/stkpush/v1/processrequest'
    )

    # Payment behaviour
    MPESA_TRANSACTION_TYPE = os.getenv('MPESA_TRANSACTION_TYPE', 'CustomerBuyGoodsOnline')
    MPESA_TIMESTAMP_FORMAT = os.getenv('MPESA_TIMESTAMP_FORMAT', 'epoch_day')

    # Timeouts (seconds)
    MPESA_AUTH_TIMEOUT = float(os.getenv('MPESA_AUTH_TIMEOUT', 15))
    MPESA_GATEWAY_TIMEOUT = float(os.getenv('MPESA_GATEWAY_TIMEOUT', 30))
    MPESA_TOKEN_EXPIRY_MARGIN = int(os.getenv('MPESA_TOKEN_EXPIRY_MARGIN', 60))

    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    MPESA_CONSUMER_KEY = 'test_consumer_key'
    MPESA_CONSUMER_SECRET = 'test_consumer_secret'
    MPESA_PASSKEY = 'test_passkey'
    MPESA_AUTH_URL = 'https://sandbox.safaricom.co.ke/oauth/v1/generate'
    MPESA_BUY_GOODS_URL = 'https://sandbox.safaricom.co.ke/mpesa/stkpush/v1/processrequest'
    MPESA_TIMESTAMP_FORMAT = 'epoch_day'
    LOG_DIR = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

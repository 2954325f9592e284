"""
Utils Package
Utility functions and helpers
"""

from mpesa_connector.utils.logger import get_logger, configure_app_logging, RequestLogger, mask_secret
from mpesa_connector.utils.credentials import (
    generate_password,
    epoch_day_timestamp,
    compact_datetime_timestamp,
    get_timestamp_provider
)

__all__ = [
    'get_logger',
    'configure_app_logging',
    'RequestLogger',
    'mask_secret',
    'generate_password',
    'epoch_day_timestamp',
    'compact_datetime_timestamp',
    'get_timestamp_provider'
]

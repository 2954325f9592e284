"""
Logging Configuration
Centralized logging setup for the M-Pesa connector

Module loggers only write to the console. File handlers are attached to the
package logger by configure_app_logging, using the app's LOG_DIR, and module
loggers reach them by propagation.
"""

import logging
import os
import sys
import time
from logging.handlers import RotatingFileHandler

PACKAGE_LOGGER = 'mpesa_connector'


def _ensure_dir(log_dir: str) -> bool:
    if not log_dir:
        return False
    if not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir)
        except OSError:
            return False
    return True


def _rotating_handler(path: str, level: int, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=10485760,  # 10MB
        backupCount=10
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    path = os.path.abspath(path)
    return any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == path
        for h in logger.handlers
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(logging.INFO)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(
            '%(levelname)s - %(name)s - %(message)s'
        ))

        logger.addHandler(console_handler)

    return logger


def mask_secret(value, visible: int = 4) -> str:
    """Mask all but the last `visible` characters of a secret"""
    if not value:
        return ''
    value = str(value)
    if len(value) <= visible:
        return '*' * len(value)
    return '*' * (len(value) - visible) + value[-visible:]


def configure_app_logging(app):
    """
    Configure file logging from app.config['LOG_DIR']; an empty value
    keeps logging on the console only

    Args:
        app: Flask application instance
    """
    app.logger.setLevel(logging.INFO)

    log_dir = app.config.get('LOG_DIR')
    if not _ensure_dir(log_dir):
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.INFO)

    connector_log = os.path.join(log_dir, 'mpesa-connector.log')
    if not _has_file_handler(package_logger, connector_log):
        package_logger.addHandler(_rotating_handler(
            connector_log,
            logging.INFO,
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))

    error_log = os.path.join(log_dir, 'error.log')
    if not _has_file_handler(app.logger, error_log):
        app.logger.addHandler(_rotating_handler(
            error_log,
            logging.ERROR,
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s\n%(pathname)s:%(lineno)d'
        ))


class RequestLogger:
    """Middleware logging each inbound request with its account reference"""

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Initialize request logging"""
        from flask import g, request

        logger = get_logger(f'{PACKAGE_LOGGER}.request')

        def account_reference():
            body = request.get_json(silent=True) if request.is_json else None
            if isinstance(body, dict):
                return body.get('AccountReference') or '-'
            return '-'

        @app.before_request
        def log_request():
            g.request_started = time.monotonic()
            logger.info(
                '%s %s - ref: %s - IP: %s',
                request.method, request.path, account_reference(), request.remote_addr
            )

        @app.after_request
        def log_response(response):
            started = g.get('request_started')
            elapsed_ms = (time.monotonic() - started) * 1000 if started else 0.0
            logger.info(
                '%s %s - ref: %s - Status: %s - %.0fms',
                request.method, request.path, account_reference(),
                response.status_code, elapsed_ms
            )
            return response

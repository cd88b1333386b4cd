"""
Logging Configuration
Centralized logging setup for the PhonePe client
"""

import logging
import os
import sys
import time
from logging.handlers import RotatingFileHandler
from typing import Optional

from flask import g, request


def get_logger(name: str, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance

    Args:
        name: Logger name (typically __name__)
        log_dir: Directory for the rotating log file; LOG_DIR env or 'logs'

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(logging.INFO)

        # Console handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)

        # File handler (if logs directory can be created)
        log_dir = log_dir or os.getenv('LOG_DIR', 'logs')
        try:
            os.makedirs(log_dir, exist_ok=True)
        except OSError:
            logger.debug("Cannot create log directory %s; logging to console only", log_dir)

        if os.path.isdir(log_dir):
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'phonepe-client.log'),
                maxBytes=10485760,  # 10MB
                backupCount=10
            )
            file_handler.setLevel(logging.INFO)

            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

        console_formatter = logging.Formatter(
            '%(levelname)s - %(name)s - %(message)s'
        )
        console_handler.setFormatter(console_formatter)

        logger.addHandler(console_handler)

    return logger


class RequestLogger:
    """Logs one line per request: method, path, status and elapsed time."""

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        logger = get_logger('phonepe_client.requests', app.config.get('LOG_DIR'))

        @app.before_request
        def start_timer():
            g.request_started = time.monotonic()

        @app.after_request
        def log_request(response):
            started = g.pop('request_started', None)
            elapsed_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
            logger.info(
                '%s %s -> %s (%.1f ms) from %s',
                request.method,
                request.path,
                response.status_code,
                elapsed_ms,
                request.remote_addr,
            )
            return response

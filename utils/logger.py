"""
Professional Logging Setup

Provides centralized logging configuration for the Flask application
with structured output, request tracking and a plain-text access log.
"""

import logging
import sys
from flask import request, has_request_context

ACCESS_LOGGER_NAME = 'access'


def _remove_handlers(logger, marker):
    """Detach and close handlers installed by a previous setup call."""
    for old in [h for h in logger.handlers if getattr(h, '_site_marker', None) == marker]:
        logger.removeHandler(old)
        old.close()


def _replace_handler(logger, handler, marker):
    """Swap out a handler installed by a previous setup call."""
    _remove_handlers(logger, marker)
    handler._site_marker = marker
    logger.addHandler(handler)


def setup_access_log(path):
    """
    Configure the access log file.

    Each request appends one line: "<local time> | <remote addr> | <url>".

    Args:
        path: File to append to, or a falsy value to disable the log

    Returns:
        The access logger
    """
    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    access_logger.setLevel(logging.INFO)
    access_logger.propagate = False

    if not path:
        _remove_handlers(access_logger, 'access-file')
        access_logger.disabled = True
        return access_logger

    access_logger.disabled = False
    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s | %(message)s', datefmt='%d/%m/%Y, %H:%M:%S'))
    _replace_handler(access_logger, handler, 'access-file')
    return access_logger


def setup_logger(app):
    """
    Configure professional logging for the Flask application.

    Sets up:
    - Structured log format with timestamps
    - Console output to stdout
    - Request logging for all incoming HTTP requests
    - Access log lines appended to ACCESS_LOG_FILE
    - Appropriate log level based on environment

    Args:
        app: Flask application instance
    """
    # Create console handler
    handler = logging.StreamHandler(sys.stdout)

    # Create formatter with detailed structure
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    # Configure app logger
    _replace_handler(app.logger, handler, 'console')

    # Set log level based on debug mode
    if app.debug:
        app.logger.setLevel(logging.DEBUG)
    else:
        app.logger.setLevel(logging.INFO)

    # Prevent duplicate logs from propagating
    app.logger.propagate = False

    access_logger = setup_access_log(app.config.get('ACCESS_LOG_FILE'))

    @app.before_request
    def log_request_info():
        """Log incoming request details."""
        if has_request_context():
            access_logger.info(f"{request.remote_addr} | {request.url}")
            app.logger.info(
                f"Request: {request.method} {request.path} "
                f"from {request.remote_addr}"
            )

    @app.after_request
    def log_response_info(response):
        """Log response status."""
        if has_request_context():
            app.logger.info(
                f"Response: {response.status_code} for "
                f"{request.method} {request.path}"
            )
        return response

    # Log startup
    app.logger.info(f"Logging configured - Level: {logging.getLevelName(app.logger.level)}")

    return app

from flask import Flask
from werkzeug.exceptions import HTTPException
import logging

logger = logging.getLogger(__name__)


class TodoError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(TodoError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class InternalError(TodoError):
    status_code = 500


def _plain(message, status):
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}


def register_error_handlers(app: Flask):
    @app.errorhandler(TodoError)
    def handle_todo_error(error):
        if error.status_code >= 500:
            logger.error(f"Internal error: {error.message}")
        return _plain(error.message, error.status_code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        # Routing errors (unknown path, wrong method) keep Flask's own response
        if isinstance(error, HTTPException):
            return error
        logger.error(f"Unhandled error during request: {error}", exc_info=True)
        return _plain(str(error), InternalError.status_code)

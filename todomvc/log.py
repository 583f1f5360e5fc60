import logging
from flask import Flask, request

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

http_logger = logging.getLogger("todomvc.http")


def configure_logging(level="INFO"):
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("todomvc").setLevel(level)


def register_request_logging(app: Flask):
    @app.after_request
    def log_response(response):
        http_logger.info(f"{request.method} {request.path} -> {response.status_code}")
        return response

"""
A session-scoped todo list served as HTML fragments for htmx.
"""

from cachelib import SimpleCache
from flask import Flask
from flask_session import Session

from .config import Config
from .errors import register_error_handlers
from .log import configure_logging, register_request_logging
from .routes import todos_bp


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if isinstance(config, dict):
        app.config.update(config)
    elif config is not None:
        app.config.from_object(config)

    configure_logging(app.config["LOG_LEVEL"])
    # Each app gets its own in-memory store, lost on restart
    app.config.setdefault(
        "SESSION_CACHELIB", SimpleCache(threshold=app.config["SESSION_CACHE_THRESHOLD"])
    )
    Session(app)
    register_error_handlers(app)
    register_request_logging(app)
    app.register_blueprint(todos_bp)
    return app

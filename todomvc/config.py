import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")  # Change this in production
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    # Todo lists stay in process memory; the cookie only carries the session id
    SESSION_TYPE = "cachelib"
    SESSION_CACHE_THRESHOLD = 10000
    # Served over plain HTTP in development
    SESSION_COOKIE_SECURE = False
    HOST = "0.0.0.0"
    PORT = 3000


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "testing"

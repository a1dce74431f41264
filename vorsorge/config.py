"""Default application settings.

Values can be overridden with ``VORSORGE_``-prefixed environment variables,
e.g. ``VORSORGE_LOG_LEVEL=DEBUG`` or
``VORSORGE_CORS_ORIGINS='["https://rechner.example"]'``.
"""


class Config:
    API_PREFIX = "/api"

    # Origins of the frontend dev servers.
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

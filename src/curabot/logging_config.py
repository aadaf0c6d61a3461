"""JSON log output for the bot process.

Every record goes to stdout as one JSON object. ``severity``, ``timestamp``
and ``logger`` replace the stdlib attribute names so the hosting platform's
log viewer can filter on them, and each record carries ``service: curabot``.
"""

import logging.config

SERVICE_NAME = "curabot"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s"
RENAMED_FIELDS = {
    "levelname": "severity",
    "asctime": "timestamp",
    "name": "logger",
}


def build_logging_config(level: str = "INFO") -> dict:
    """Return a ``dictConfig`` schema routing the root logger to JSON on stdout."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": LOG_FORMAT,
                "rename_fields": dict(RENAMED_FIELDS),
                "static_fields": {"service": SERVICE_NAME},
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": level.upper(), "handlers": ["stdout"]},
    }


def configure_logging(level: str = "INFO") -> None:
    """Install JSON logging; used by the app lifespan and ``curabot-register``."""
    logging.config.dictConfig(build_logging_config(level))

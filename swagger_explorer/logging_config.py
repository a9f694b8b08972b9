import logging
import logging.config

from pythonjsonlogger import jsonlogger

try:
    from swagger_explorer.config import settings
except ImportError:
    from config import settings

JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(pathname)s %(lineno)d %(process)d %(thread)d"
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_logging_config(log_format: str = "json", level: str = "INFO") -> dict:
    if log_format == "json":
        formatter = {"()": jsonlogger.JsonFormatter, "fmt": JSON_FORMAT}
    else:
        formatter = {"format": TEXT_FORMAT}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            log_format: formatter
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": log_format,
                "level": level,
            }
        },
        "root": {
            "handlers": ["console"],
            "level": level
        }
    }


def init_logging() -> None:
    logging.config.dictConfig(
        build_logging_config(settings.LOG_FORMAT, settings.LOG_LEVEL.upper())
    )

import logging.config
import sys


def configure_logging(level: str = "WARNING") -> None:
    """Route all log records to stderr so they never mix with board output."""
    level = level.upper()
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },

        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },

        "loggers": {
            "": {  # root
                "handlers": ["console"],
                "level": level,
                "propagate": True,
            },
        },
    }

    logging.config.dictConfig(logging_config)

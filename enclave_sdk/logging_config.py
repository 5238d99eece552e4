"""
Logging configuration that keeps per-request HTTP client chatter out of SDK logs
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional


class HttpxRequestFilter(logging.Filter):
    """Filter to suppress httpx per-request log lines."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out the 'HTTP Request: ...' lines httpx emits at INFO."""
        if record.name.startswith("httpx") and record.levelno <= logging.INFO:
            if record.getMessage().startswith("HTTP Request:"):
                return False
        return True


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with HTTP request suppression."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "httpx_request_filter": {
                "()": HttpxRequestFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr"
            },
            "http": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
                "filters": ["httpx_request_filter"]
            }
        },
        "loggers": {
            "httpx": {
                "handlers": ["http"],
                "level": "WARNING" if level == "INFO" else level,
                "propagate": False
            },
            "enclave_sdk": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the SDK logging configuration, defaulting to LOG_LEVEL."""
    logging.config.dictConfig(get_logging_config(level or os.getenv("LOG_LEVEL", "INFO")))

"""Central logging configuration.

Installs a single stdout handler on the root logger so every module logger
(``logging.getLogger(__name__)``) is visible in the Streamlit console.
Streamlit re-runs the script on each interaction, so configuration is applied
only once per process.
"""
from __future__ import annotations

import logging
from logging.config import dictConfig

from utils.settings import get_settings

_CONFIGURED = False


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "domain": {"level": level, "handlers": ["console"], "propagate": False},
            "services": {"level": level, "handlers": ["console"], "propagate": False},
            "views": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: str | None = None) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return
    dictConfig(_dict_config(level or get_settings().log_level))
    _CONFIGURED = True
    logging.getLogger(__name__).debug("logging configured")

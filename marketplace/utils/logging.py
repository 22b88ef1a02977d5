# marketplace/utils/logging.py
import logging
import sys

from pythonjsonlogger import jsonlogger

from marketplace.utils.settings import LOG_FORMAT, LOG_LEVEL

_configured = False


def _configure_root():
    global _configured
    if _configured:
        return

    root = logging.getLogger("marketplace")
    root.setLevel(LOG_LEVEL.upper())

    handler = logging.StreamHandler(sys.stdout)
    if LOG_FORMAT == "json":
        handler.setFormatter(
            jsonlogger.JsonFormatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"levelname": "level"},
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    _configure_root()
    return logging.getLogger(name)

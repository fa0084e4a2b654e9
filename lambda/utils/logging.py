import logging
import os
import sys
import uuid
from contextvars import ContextVar

_request_id: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    def filter(self, record):
        record.request_id = _request_id.get()
        return True


def _configure() -> logging.Logger:
    logger = logging.getLogger("wordbook")
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(RequestIdFilter())
        logger.addHandler(handler)
    logger.propagate = False

    # SDK clients are chatty at INFO
    for name in ("httpx", "httpcore", "openai", "notion_client", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


_logger = _configure()


def set_request_id(request_id: str = None) -> str:
    request_id = request_id or str(uuid.uuid4())
    _request_id.set(request_id)
    return request_id


def get_request_id() -> str:
    return _request_id.get()


def clear_request_id():
    _request_id.set("-")


def debug(msg: str, *args, **kwargs):
    _logger.debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs):
    _logger.info(msg, *args, **kwargs)


def warning(msg: str, *args, **kwargs):
    _logger.warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs):
    _logger.error(msg, *args, **kwargs)


def exception(msg: str, *args, **kwargs):
    _logger.exception(msg, *args, **kwargs)

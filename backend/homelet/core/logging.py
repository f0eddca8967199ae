# homelet/core/logging.py
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Set up the "homelet" logger family.

    Under uvicorn we reuse the handlers of "uvicorn.error" so our lines
    share its output; otherwise (scripts, shell) a plain stream handler
    is attached once.
    """
    logger = logging.getLogger("homelet")
    logger.setLevel(level.upper())

    uvicorn_logger = logging.getLogger("uvicorn.error")
    if uvicorn_logger.handlers:
        logger.handlers = list(uvicorn_logger.handlers)
        logger.propagate = False
    elif not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the "homelet" logger, e.g. get_logger("bookings")."""
    return logging.getLogger(f"homelet.{name}")

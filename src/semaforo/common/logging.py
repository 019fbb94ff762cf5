import logging
import time
from functools import wraps
from typing import Callable, Optional, Union

from .exceptions import ValidationError

# Owns the handler; module loggers below it propagate here
ROOT_LOGGER = "semaforo"

def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Sets up a logger with a standard format.
    The level defaults to INFO on first setup; an explicit level always applies.
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else logging.INFO)
    elif level is not None:
        logger.setLevel(level)
    return logger

def get_logger(name: str) -> logging.Logger:
    """
    Module logger under the package logger, whose handler and level it inherits.
    """
    setup_logger(ROOT_LOGGER)
    return logging.getLogger(name)

def log_execution_time(logger: logging.Logger):
    """
    Decorator to measure and log execution time of a store operation.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.time()
            try:
                result = func(*args, **kwargs)
                elapsed = time.time() - start
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f"{func.__qualname__} executed in {elapsed:.3f}s")
                return result
            except ValidationError as e:
                logger.warning(f"{func.__qualname__} rejected input: {e}")
                raise
            except Exception as e:
                logger.error(f"{func.__qualname__} failed: {e}", exc_info=True)
                raise
        return wrapper
    return decorator

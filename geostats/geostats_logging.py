"""This provides logging functionality for geostats.

It is built on the logging module from the standard library. All geostats loggers
live below a single root logger named ``GEOSTATS``, so they can be enabled or
silenced in one place. The library itself never attaches handlers; call
:func:`log_to_stderr` to see the records.

Logging is mostly DEBUG level: index construction in neighborhoods, permutation
draws in random paths, bounding-grid computation, and table ingestion.

"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO

__all__ = [
    "DEBUG",
    "INFO",
    "create_module_logger",
    "function_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]

GEOSTATS_LOGGER_NAME = "GEOSTATS"
DEFAULT_LEVEL = DEBUG


def create_module_logger(name: str | None = None):
    """Create a module logger.

    Args:
        name: name of the module for which the logger is created. If None, the
            name of the calling module is used.

    """
    if name is None:
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        name = mod.__name__
    logger_name = f"{GEOSTATS_LOGGER_NAME}.{name}"
    logger = logging.getLogger(logger_name)
    return logger


def get_module_logger(name: str):
    """Return the geostats logger for the named module."""
    logger_name = f"{GEOSTATS_LOGGER_NAME}.{name}"
    return logging.getLogger(logger_name)


def method_logger(name: str):
    """Decorator for adding debug logging to a method.

    Args:
        name: The name of the module in which the method is defined.

    """
    logger = get_module_logger(name)
    classname = name.split(".")[-1]

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # skip self
            logger.debug(
                f"calling {classname}.{func.__name__} with {args[1::]} and {kwargs}"
            )
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def function_logger(name: str):
    """Decorator for adding debug logging to a function.

    Args:
        name: The name of the module in which the function is defined.

    """
    logger = get_module_logger(name)

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug(f"calling {func.__name__} with {args} and {kwargs}")
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def get_rootlogger():
    """Return the root logger of geostats."""
    return logging.getLogger(GEOSTATS_LOGGER_NAME)


def log_to_stderr(level: int | None = None, pass_through: bool = True):
    """Log geostats messages to stderr.

    Args:
        level: The logging level to use. If None, DEFAULT_LEVEL is used.
        pass_through: Whether records also propagate to the python root logger.

    """
    if level is None:
        level = DEFAULT_LEVEL

    logger = get_rootlogger()
    logger.setLevel(level)

    formatter = logging.Formatter(
        "[%(levelname)s] %(name)s:%(lineno)d - %(message)s"
    )
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = pass_through

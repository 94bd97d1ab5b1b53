#!/usr/bin/env python3

"""Logging helpers shared across the extractor."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAMESPACE = "offset_extractor"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """Log how long ``func`` ran, and whether it raised."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        started = perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug(
                f"{func.__qualname__} aborted after {perf_counter() - started:.3f}s: "
                f"{type(e).__name__}"
            )
            raise
        logger.debug(f"{func.__qualname__} finished in {perf_counter() - started:.3f}s")
        return result

    return cast("F", wrapper)

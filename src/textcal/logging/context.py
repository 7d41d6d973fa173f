"""
Call logging for textcal operations.
"""

from functools import wraps
from typing import Optional

from textcal.exceptions import TextcalError

from .loggers import TextcalLogger
from .manager import logging_manager


def logged(level: str = "debug", logger: Optional[TextcalLogger] = None):
    """Log the calls of a textcal operation under its function name.

    A TextcalError leaving the call is tagged with the operation when the
    raising code did not name one, and logged once, at the call level, with
    its argument and error code. Nested decorated calls therefore report the
    innermost operation that rejected its input.
    """
    def decorator(func):
        operation = func.__name__
        func_logger = logger or logging_manager.get_logger(func.__module__)
        log_method = getattr(func_logger, level.lower())

        @wraps(func)
        def wrapper(*args, **kwargs):
            log_method(f"Calling {operation}", operation=operation)
            try:
                result = func(*args, **kwargs)
            except TextcalError as e:
                if e.operation is None:
                    e.operation = operation
                    log_method(
                        f"{operation} rejected its input: {e.message}",
                        operation=operation,
                        argument=e.argument,
                        error_code=e.error_code,
                        error_id=e.correlation_id,
                    )
                raise
            except Exception as e:
                func_logger.error(f"Failed {operation}: {e}", operation=operation)
                raise
            log_method(f"Completed {operation}", operation=operation)
            return result
        return wrapper
    return decorator

"""Call logging for the weatherfinder client layer."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

logger = logging.getLogger("weatherfinder.api")

_file_handlers: dict[str, logging.FileHandler] = {}
_handlers_lock = threading.Lock()


def enable_file_logging(path: str, level: int = logging.DEBUG) -> logging.FileHandler:
    """Write all ``weatherfinder`` log records to ``path``.

    Creates the parent directory on first use. Calling again with the same
    path returns the existing handler.
    """
    path = os.path.abspath(path)
    with _handlers_lock:
        handler = _file_handlers.get(path)
        if handler is not None:
            return handler

        os.makedirs(os.path.dirname(path), exist_ok=True)

        package_logger = logging.getLogger("weatherfinder")
        package_logger.setLevel(level)

        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        _file_handlers[path] = handler
    return handler


def disable_file_logging() -> None:
    """Detach and close every handler added by :func:`enable_file_logging`."""
    package_logger = logging.getLogger("weatherfinder")
    with _handlers_lock:
        for handler in _file_handlers.values():
            package_logger.removeHandler(handler)
            handler.close()
        _file_handlers.clear()


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _log_ok(name: str, arg_str: str, result: Any, start: float) -> None:
    elapsed = time.monotonic() - start
    count = len(result) if isinstance(result, list) else 1
    logger.info("OK: %s(%s) -> %d items (%.3fs)", name, arg_str, count, elapsed)


def _log_fail(name: str, arg_str: str, exc: Exception, start: float) -> None:
    elapsed = time.monotonic() - start
    logger.error(
        "FAIL: %s(%s) -> %s: %s (%.3fs)",
        name, arg_str, type(exc).__name__, exc, elapsed,
    )


def log_api_call(fn: F) -> F:
    """Decorator that logs client method calls, sync or async."""

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            arg_str = _describe_args(args, kwargs)
            logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _log_fail(fn.__qualname__, arg_str, exc, start)
                raise
            _log_ok(fn.__qualname__, arg_str, result, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _describe_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _log_fail(fn.__qualname__, arg_str, exc, start)
            raise
        _log_ok(fn.__qualname__, arg_str, result, start)
        return result

    return wrapper  # type: ignore[return-value]

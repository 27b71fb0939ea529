"""API call logging for the Skycast client and service layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.environ.get("SKYCAST_LOG_DIR", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def set_log_dir(log_dir: str) -> None:
    """Point the API log at ``log_dir``. Takes effect on the next logged call."""
    global _LOG_DIR, _LOG_FILE, _logger
    with _logger_lock:
        if _logger is not None:
            for handler in _logger.handlers[:]:
                handler.close()
                _logger.removeHandler(handler)
        _LOG_DIR = log_dir
        _LOG_FILE = os.path.join(log_dir, "api_calls.log")
        _logger = None


def configure_logging(level: int = logging.INFO) -> None:
    """Set up console logging for an entry point.

    httpx logs every request URL at INFO, and those URLs carry the
    ``appid`` credential, so its loggers are held at WARNING.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger("skycast.api")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _format_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def log_api_call(fn: F) -> F:
    """Decorator that logs provider endpoint calls to the API log file.

    Works on both plain methods and coroutine methods.
    """

    def _ok(name: str, arg_str: str, result: Any, start: float) -> None:
        count = len(result) if isinstance(result, list) else 1
        _get_logger().info(
            "OK: %s(%s) -> %d items (%.3fs)",
            name, arg_str, count, time.monotonic() - start,
        )

    def _fail(name: str, arg_str: str, exc: Exception, start: float) -> None:
        _get_logger().error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            name, arg_str, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            arg_str = _format_args(args, kwargs)
            _get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(fn.__qualname__, arg_str, exc, start)
                raise
            _ok(fn.__qualname__, arg_str, result, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _format_args(args, kwargs)
        _get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(fn.__qualname__, arg_str, exc, start)
            raise
        _ok(fn.__qualname__, arg_str, result, start)
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Decorator that logs service-layer method calls to the API log file."""

    def _fail(name: str, exc: Exception, start: float) -> None:
        _get_logger().error(
            "SERVICE FAIL: %s -> %s: %s (%.3fs)",
            name, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = _get_logger()
            logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, _format_args(args, kwargs))
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(fn.__qualname__, exc, start)
                raise
            logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, _format_args(args, kwargs))
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(fn.__qualname__, exc, start)
            raise
        logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]

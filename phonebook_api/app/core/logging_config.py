"""
Logging configuration for the application.

``setup_logging`` configures the root logger with a console and an
optional file handler.  ``log_requests`` is an HTTP middleware that
writes one access line per request, in the spirit of the ``morgan``
``tiny`` format: method, URL, status, response size and elapsed time.
"""

import logging
import time
from pathlib import Path
from typing import Awaitable, Callable, Optional

from fastapi import Request, Response

access_logger = logging.getLogger("phonebook_api.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send phonebook logs (service events and the access log) to stderr.

    ``level`` comes from ``LOG_LEVEL``; when ``LOG_FILE`` is set the same
    lines are also appended to ``logfile``.  The call is a no‑op once the
    root logger has handlers, so each test app or a server run under
    uvicorn keeps the existing configuration.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log ``METHOD URL STATUS LENGTH - TIME ms`` for every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    access_logger.info(
        "%s %s %s %s - %.3f ms",
        request.method,
        url,
        response.status_code,
        response.headers.get("content-length", "-"),
        elapsed_ms,
    )
    return response

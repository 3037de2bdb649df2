"""Error types and the error-reporting channel shared by the core."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class FoodOrderError(Exception):
    """Base class for errors raised by foodorder."""


class ApiError(FoodOrderError):
    def __init__(self, status_code: int, body_text: str, url: str = "") -> None:
        super().__init__(f"API error {status_code} at {url or '?'}: {body_text[:200]}")
        self.status_code = status_code
        self.body_text = body_text
        self.url = url


class SubmissionInProgress(FoodOrderError):
    """Raised (and reported) when an order is submitted twice concurrently."""


ErrorSink = Callable[[str, Exception], None]


def log_error_sink(operation: str, error: Exception) -> None:
    """Default sink: record the failure in the debug log."""
    logger.error("%s failed: %s", operation, error, exc_info=error)

"""Caller-supplied deadlines for stock commands."""

import os
from datetime import UTC, datetime, timedelta

from stockroom.exceptions import StockCommandTimeout

DEFAULT_TIMEOUT_SECONDS = 5.0


def command_timeout() -> timedelta:
    """Deadline budget granted to each stock command by the HTTP layer."""
    return timedelta(seconds=float(os.getenv("STOCK_COMMAND_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)))


def deadline_from_now(timeout: timedelta | None = None) -> datetime:
    return datetime.now(UTC) + (timeout if timeout is not None else command_timeout())


def ensure_before_deadline(deadline: datetime | None, product_id, stage: str) -> None:
    """Raise StockCommandTimeout if ``deadline`` has passed.

    Naive datetimes are read as UTC.
    """
    if deadline is None:
        return

    if deadline.tzinfo is None:
        deadline = deadline.replace(tzinfo=UTC)

    if datetime.now(UTC) >= deadline:
        raise StockCommandTimeout(product_id, stage)

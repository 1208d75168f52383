from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger("fxexchange.errors")


class ExchangeValidationError(ValueError):
    """Raised for any invalid input or unsupported currency.

    The message is meant to be shown to the user as-is.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SupportsWriteLine(Protocol):
    def write_line(self, value: str) -> None: ...


def report_error(console: SupportsWriteLine, exc: Exception) -> None:
    """Report a failed conversion and let the run loop carry on."""
    if isinstance(exc, ExchangeValidationError):
        logger.warning("conversion rejected: %s", exc.message)
    else:
        logger.exception("unexpected error during conversion")
    console.write_line(f"Error: {exc}")
    console.write_line("Please try again.")

from __future__ import annotations

"""Console input collector.

Reads a currency pair and an amount line by line, validates both against the
rate provider and writes the result line. Every failure is raised as an
ExchangeValidationError whose message is shown to the user verbatim.
"""
import logging
from decimal import Decimal
from typing import Tuple

from fxexchange.core.errors import ExchangeValidationError
from fxexchange.models.currency import Currency
from fxexchange.services.money import format_amount, localize_decimal, parse_decimal
from fxexchange.services.rates.base import ExchangeRateProvider
from fxexchange.utils.console import SupportsConsole

logger = logging.getLogger("fxexchange.console")

PAIR_PROMPT = "Enter currency pair, e.g. EUR/DKK: "
AMOUNT_PROMPT = "Enter amount to convert: "


class ConsoleUserInterface:
    def __init__(self, rate_provider: ExchangeRateProvider, console: SupportsConsole):
        self._rates = rate_provider
        self._console = console

    def get_iso_currency_pair(self) -> Tuple[Currency, Currency]:
        self._console.write(PAIR_PROMPT)
        line = self._console.read_line()
        pair = line.upper() if line is not None else None

        if not pair:
            raise ExchangeValidationError("Currency pair cannot be empty.")

        parts = [p.strip() for p in pair.split("/")]
        if len(parts) != 2 or not all(parts):
            raise ExchangeValidationError(
                "Currency pair must be in the format 'CURRENCY1/CURRENCY2'."
            )

        base_found, base = self._rates.try_get_currency(parts[0])
        quote_found, quote = self._rates.try_get_currency(parts[1])
        if not (base_found and quote_found):
            supported = ", \n".join(str(c) for c in self._rates.get_supported_currencies())
            raise ExchangeValidationError(
                f"Exchange rates not available for currency pair: {pair}.\n"
                f"Supported currencies are:\n{supported}."
            )

        logger.debug("pair resolved: %s/%s", base.code, quote.code)
        return base, quote

    def get_amount(self) -> Decimal:
        self._console.write(AMOUNT_PROMPT)
        amount = parse_decimal(self._console.read_line())
        if amount is None or amount <= 0:
            raise ExchangeValidationError("Amount must be a positive number.")
        return amount

    def display_result(
        self,
        amount: Decimal,
        base_currency: Currency,
        converted_amount: Decimal,
        quote_currency: Currency,
    ) -> None:
        self._console.write_line(
            f"{localize_decimal(amount)} {base_currency} = "
            f"{format_amount(converted_amount)} {quote_currency}"
        )

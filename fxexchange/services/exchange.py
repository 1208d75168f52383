from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol, Tuple

from fxexchange.models.currency import Currency
from fxexchange.services.rates.base import SupportsRateLookup
from fxexchange.services.rates.conversion import ConversionRequest, convert

logger = logging.getLogger("fxexchange.exchange")


class UserInterface(Protocol):
    def get_iso_currency_pair(self) -> Tuple[Currency, Currency]: ...

    def get_amount(self) -> Decimal: ...

    def display_result(
        self,
        amount: Decimal,
        base_currency: Currency,
        converted_amount: Decimal,
        quote_currency: Currency,
    ) -> None: ...


class StaticExchangeService:
    """Runs one conversion end-to-end: ask, convert, show.

    Errors from the UI or the rate provider are not handled here.
    """

    def __init__(self, rate_provider: SupportsRateLookup, user_interface: UserInterface):
        self._rates = rate_provider
        self._ui = user_interface

    def process_currency_exchange(self) -> None:
        base, quote = self._ui.get_iso_currency_pair()
        amount = self._ui.get_amount()
        converted = self.convert_currency(base, quote, amount)
        self._ui.display_result(amount, base, converted, quote)

    def convert_currency(self, base: Currency, quote: Currency, amount: Decimal) -> Decimal:
        result = convert(ConversionRequest(base=base, quote=quote, amount=amount), self._rates)
        logger.info(
            "converted %s %s -> %s",
            amount,
            base.code,
            quote.code,
            extra={
                "pair": f"{base.code}/{quote.code}",
                "amount": amount,
                "converted_amount": result.converted_amount,
                "base_rate": result.base_rate,
                "quote_rate": result.quote_rate,
            },
        )
        return result.converted_amount

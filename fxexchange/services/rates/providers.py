from __future__ import annotations

"""Concrete rate provider backed by an in-memory table.

The table is either the built-in DKK-anchored literal below or the list of
entries from ``ExchangeRateConfiguration`` (never a merge of the two).
"""
import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from fxexchange.core.errors import ExchangeValidationError
from fxexchange.models.currency import Currency
from fxexchange.models.rates import ExchangeRateConfiguration

from .base import ExchangeRateProvider

logger = logging.getLogger("fxexchange.rates")

# DKK per 1 unit; DKK is the anchor
_STATIC_RATES_IN_DKK: Mapping[Currency, Decimal] = MappingProxyType(
    {
        Currency("DKK", "Danish kroner"): Decimal("1.0"),
        Currency("EUR", "Euro"): Decimal("7.4394"),
        Currency("USD", "Amerikanske dollar"): Decimal("6.6311"),
        Currency("GBP", "Britiske pund"): Decimal("8.5285"),
        Currency("SEK", "Svenske kroner"): Decimal("0.7610"),
        Currency("NOK", "Norske kroner"): Decimal("0.7840"),
        Currency("CHF", "Schweiziske franc"): Decimal("6.8358"),
        Currency("JPY", "Japanske yen"): Decimal("0.059740"),
    }
)


def _rates_from_configuration(
    config: ExchangeRateConfiguration,
) -> Mapping[Currency, Decimal]:
    rates: Dict[Currency, Decimal] = {}
    for entry in config.currencies:
        currency = Currency(entry.code, entry.name)
        if currency in rates:
            logger.warning("duplicate rate entry for %s; keeping first name, last rate", currency.code)
        rates[currency] = entry.rate
    return MappingProxyType(rates)


class StaticExchangeRateProvider(ExchangeRateProvider):
    def __init__(self, config: Optional[ExchangeRateConfiguration] = None):
        config = config or ExchangeRateConfiguration()
        if config.load_from_config:
            self._rates = _rates_from_configuration(config)
            logger.info("loaded %d rates from configuration", len(self._rates))
        else:
            self._rates = _STATIC_RATES_IN_DKK
            logger.debug("using built-in rate table")
        self._by_code: Mapping[str, Currency] = MappingProxyType(
            {c.code: c for c in self._rates}
        )

    @property
    def rates(self) -> Mapping[Currency, Decimal]:
        return self._rates

    def get_rate(self, currency: Currency) -> Decimal:
        rate = self._rates.get(currency)
        if rate is None:
            raise ExchangeValidationError(f"Currency '{currency}' is not supported.")
        return rate

    def get_supported_currencies(self) -> List[Currency]:
        return list(self._rates)

    def try_get_currency(self, code: Optional[str]) -> Tuple[bool, Optional[Currency]]:
        if not isinstance(code, str) or not code:
            return False, None
        currency = self._by_code.get(code.upper())
        if currency is None:
            return False, None
        return True, currency


def make_rate_provider(config: Optional[ExchangeRateConfiguration] = None) -> ExchangeRateProvider:
    return StaticExchangeRateProvider(config)

from __future__ import annotations

"""Rate provider abstraction.

Every rate is expressed in anchor units per 1 unit of the currency; the
converter routes all conversions through the anchor.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Protocol, Tuple

from fxexchange.models.currency import Currency


class ExchangeRateProvider(ABC):
    @abstractmethod
    def get_rate(self, currency: Currency) -> Decimal:
        """Return anchor units per 1 unit of currency."""
        raise NotImplementedError

    @abstractmethod
    def get_supported_currencies(self) -> List[Currency]:
        raise NotImplementedError

    @abstractmethod
    def try_get_currency(self, code: Optional[str]) -> Tuple[bool, Optional[Currency]]:
        """Case-insensitive lookup; (False, None) when nothing matches."""
        raise NotImplementedError


class SupportsRateLookup(Protocol):
    def get_rate(self, currency: Currency) -> Decimal: ...

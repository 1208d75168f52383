"""Domain models for the FX exchange console."""

from .currency import Currency
from .rates import CurrencyRateConfig, ExchangeRateConfiguration

__all__ = [
    "Currency",
    "CurrencyRateConfig",
    "ExchangeRateConfiguration",
]

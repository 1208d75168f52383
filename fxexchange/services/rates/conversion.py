from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from fxexchange.models.currency import Currency

from .base import SupportsRateLookup

"""Cross-rate conversion through the anchor currency.

Responsibilities:
    - Fetch both rates via the injected provider.
    - Convert amount -> anchor -> quote with plain Decimal arithmetic.
    - Never round; rounding belongs to display (see services.money).
"""


@dataclass(frozen=True)
class ConversionRequest:
    base: Currency
    quote: Currency
    amount: Decimal


@dataclass(frozen=True)
class ConversionResult:
    request: ConversionRequest
    base_rate: Decimal
    quote_rate: Decimal
    converted_amount: Decimal


def convert(request: ConversionRequest, rates: SupportsRateLookup) -> ConversionResult:
    base_rate = rates.get_rate(request.base)
    quote_rate = rates.get_rate(request.quote)
    if request.base == request.quote:
        # same code means same table entry; skip the division entirely
        converted = request.amount
    else:
        amount_in_anchor = request.amount / base_rate
        converted = amount_in_anchor * quote_rate
    return ConversionResult(
        request=request,
        base_rate=base_rate,
        quote_rate=quote_rate,
        converted_amount=converted,
    )

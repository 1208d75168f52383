"""Money parsing / rounding helpers.

Centralized so the console and the converter agree on locale handling and on
the single place where rounding happens (display).
"""

from __future__ import annotations

import locale
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional

_TWO_PLACES = Decimal("0.01")

# sign, digits, optional fraction; no exponents, underscores or grouping left
_PLAIN_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

# largest amount the converter accepts (96-bit decimal range)
MAX_AMOUNT = Decimal("79228162514264337593543950335")


def round2(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def parse_decimal(text: Optional[str]) -> Optional[Decimal]:
    """Parse a number written with the active locale's separators.

    Returns None when the text is empty, not a plain number (exponent and
    underscore forms included) or outside the supported range.
    """
    if not text or not text.strip():
        return None
    plain = locale.delocalize(text.strip())
    if not _PLAIN_NUMBER.fullmatch(plain):
        return None
    try:
        value = Decimal(plain)
    except InvalidOperation:
        return None
    if abs(value) > MAX_AMOUNT:
        return None
    return value


def localize_decimal(value: Decimal) -> str:
    point = locale.localeconv()["decimal_point"]
    text = format(value, "f")
    return text if point == "." else text.replace(".", point)


def format_amount(value: Decimal) -> str:
    """Exactly two fractional digits, half away from zero."""
    return localize_decimal(round2(value))

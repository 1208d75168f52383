from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field, field_validator


class CurrencyRateConfig(BaseModel):
    code: str
    name: str
    rate: Decimal = Field(..., gt=0, description="Anchor units per 1 unit of currency")

    @field_validator("code")
    def valid_code(cls, v: str) -> str:
        if len(v) != 3 or any(ch.isspace() for ch in v):
            raise ValueError("currency code must be 3 characters")
        return v.upper()


class ExchangeRateConfiguration(BaseModel):
    """Externally supplied rate table.

    Ignored unless ``load_from_config`` is set, in which case it replaces
    the built-in table entirely.
    """

    load_from_config: bool = False
    currencies: List[CurrencyRateConfig] = Field(default_factory=list)

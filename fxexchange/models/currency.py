from __future__ import annotations

from dataclasses import dataclass

from fxexchange.core.errors import ExchangeValidationError


@dataclass(frozen=True, eq=False)
class Currency:
    """ISO-style currency identified by its 3-letter code.

    Equality and hashing look at the code only; two values with the same
    code and different display names are the same currency.
    """

    code: str
    name: str

    def __post_init__(self) -> None:
        code = self.code
        if (
            not isinstance(code, str)
            or len(code) != 3
            or any(ch.isspace() for ch in code)
        ):
            raise ExchangeValidationError("Currency code must be 3 characters")
        if self.name is None:
            raise ExchangeValidationError("Currency name is required")
        object.__setattr__(self, "code", code.upper())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return f"{self.code} ({self.name})"

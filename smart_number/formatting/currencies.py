"""
Currency Catalogue

The currencies the account settings let a user pick from.

DESIGN DECISION: The formatter never looks currencies up. Symbols are
passed to it explicitly; this catalogue only helps callers choose one
(e.g. the prefix of a currency input).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Currency(BaseModel):
    """A selectable currency."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    name: str = Field(..., description="Display name (Spanish)")
    symbol: str = Field(..., description="Symbol written before amounts")


PREDEFINED_CURRENCIES: tuple[Currency, ...] = (
    Currency(code="USD", name="Dólar Estadounidense", symbol="$"),
    Currency(code="EUR", name="Euro", symbol="€"),
    Currency(code="MXN", name="Peso Mexicano", symbol="$"),
    Currency(code="COP", name="Peso Colombiano", symbol="$"),
    Currency(code="ARS", name="Peso Argentino", symbol="$"),
    Currency(code="CLP", name="Peso Chileno", symbol="$"),
    Currency(code="PEN", name="Sol Peruano", symbol="S/"),
    Currency(code="BRL", name="Real Brasileño", symbol="R$"),
    Currency(code="CAD", name="Dólar Canadiense", symbol="C$"),
    Currency(code="GBP", name="Libra Esterlina", symbol="£"),
    Currency(code="JPY", name="Yen Japonés", symbol="¥"),
    Currency(code="CNY", name="Yuan Chino", symbol="¥"),
    Currency(code="CHF", name="Franco Suizo", symbol="CHF"),
    Currency(code="AUD", name="Dólar Australiano", symbol="A$"),
    Currency(code="NZD", name="Dólar Neozelandés", symbol="NZ$"),
    Currency(code="SEK", name="Corona Sueca", symbol="kr"),
    Currency(code="NOK", name="Corona Noruega", symbol="kr"),
    Currency(code="DKK", name="Corona Danesa", symbol="kr"),
    Currency(code="PLN", name="Zloty Polaco", symbol="zł"),
    Currency(code="CZK", name="Corona Checa", symbol="Kč"),
)


def find_currency(code: Optional[str]) -> Optional[Currency]:
    """Find a currency by ISO code (case-insensitive)."""
    if not code:
        return None
    wanted = code.strip().upper()
    for currency in PREDEFINED_CURRENCIES:
        if currency.code == wanted:
            return currency
    return None


def common_currencies() -> list[Currency]:
    """The ten most used currencies, in picker order."""
    return list(PREDEFINED_CURRENCIES[:10])

"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Display formatting shared by the statistics panels.
             The engine returns raw numbers; rounding and currency
             formatting happen only here.
-------------------------------------------------------------------------
"""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

Number = Union[Decimal, float, int, None]

ONE_DECIMAL = Decimal('0.1')
CENT = Decimal('0.01')


def _to_decimal(value: Number) -> Decimal:
    if value is None:
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_percentage(value: Number) -> str:
    """
    Format a percentage with one decimal.

    Usage: format_percentage(Decimal('3.04'))
    Result: 3,0 %
    """
    try:
        rounded = _to_decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return str(value)
    return f"{rounded} %".replace('.', ',')


def format_currency(value: Number) -> str:
    """
    Format an amount in euros with thousand separators and 2 decimals.

    Usage: format_currency(1234567.891)
    Result: 1 234 567,89 €
    """
    try:
        rounded = _to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return str(value)
    text = '{:,.2f}'.format(rounded)
    return text.replace(',', ' ').replace('.', ',') + ' €'

"""
Number formatting for generated CSS.

.. autofunction:: format_percentage
"""

from typing import Union

from decimal import Decimal, ROUND_HALF_UP


__all__ = [
    "round_percentage",
    "format_percentage",
]


TWO_PLACES = Decimal("0.01")


def round_percentage(number: Union[float, int, Decimal]) -> Decimal:
    """
    Round a number to two decimal places.

    Rounding is performed on the exact (binary) value of the number with ties
    rounded away from zero. This matches the behaviour of web browsers'
    ``Number.prototype.toFixed(2)`` so that styles computed here agree with
    those computed client-side.
    """
    if not isinstance(number, Decimal):
        number = Decimal(number)
    return number.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_percentage(number: Union[float, int, Decimal]) -> str:
    """
    Format a number with exactly two digits after the decimal point.

    Examples::

        >>> format_percentage(50)
        '50.00'
        >>> format_percentage(2 / 3 * 100)
        '66.67'
    """
    return str(round_percentage(number))

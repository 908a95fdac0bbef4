"""Everyday calculators: BMI, interest and a four-function calculator."""

from __future__ import annotations

import operator as _op

_OPERATIONS = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


def bmi(height: float, weight: float) -> float:
    """Return the body mass index for a height in metres and a weight in kilograms."""
    return weight / (height * height)


def bmi_category(value: float) -> str:
    """Return the category name for a BMI value.

    The bands are below 18.5, 18.5 to 24.9, 25.0 to 29.9, and anything else,
    so values falling between the bands count as obesity.
    """
    if value < 18.5:
        return "Underweight"
    if 18.5 <= value <= 24.9:
        return "Healthy Weight"
    if 25.0 <= value <= 29.9:
        return "Overweight"
    return "Obesity"


def compound_interest(principal: float, rate: float, years: float) -> float:
    """Return the interest earned at ``rate`` percent a year compounded annually."""
    return principal * (1 + rate / 100) ** years - principal


def simple_interest(principal: float, rate: float, years: float) -> float:
    """Return the simple interest at ``rate`` percent a year."""
    return principal * rate * years / 100


def calculate(operator: str, a: float, b: float) -> float:
    """Apply one of ``+ - * /`` to two numbers.

    Raise ValueError for any other operator and ZeroDivisionError when
    dividing by zero.
    """
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"Invalid operator {operator!r}") from None
    if operator == "/" and b == 0:
        raise ZeroDivisionError("Error: division by zero")
    return operation(a, b)
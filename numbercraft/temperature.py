"""Conversions between the Celsius, Fahrenheit and Kelvin temperature scales."""

from __future__ import annotations

_KELVIN_OFFSET = 273.15


def celsius_to_kelvin(celsius: float) -> float:
    """Convert a temperature in degrees Celsius to kelvins."""
    return celsius + _KELVIN_OFFSET


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert a temperature in kelvins to degrees Celsius."""
    return kelvin - _KELVIN_OFFSET


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature in degrees Celsius to degrees Fahrenheit."""
    return celsius * (9.0 / 5.0) + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert a temperature in degrees Fahrenheit to degrees Celsius."""
    return (fahrenheit - 32) * (5.0 / 9.0)


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    """Convert a temperature in degrees Fahrenheit to kelvins, by way of Celsius."""
    return celsius_to_kelvin(fahrenheit_to_celsius(fahrenheit))


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """Convert a temperature in kelvins to degrees Fahrenheit, by way of Celsius."""
    return celsius_to_fahrenheit(kelvin_to_celsius(kelvin))
"""Number, digit, array, character, calculator and temperature routines."""

__version__ = "0.1.0"
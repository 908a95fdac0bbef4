"""Interactive temperature converter.

Each of the conversion type, the direction and the temperature may be
given on the command line; whatever is missing is asked for on standard
input.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from numbercraft.temperature import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)


@dataclass(frozen=True)
class _Conversion:
    source: str
    target: str
    convert: Callable[[float], float]


_MENU: dict[int, tuple[str, tuple[_Conversion, _Conversion]]] = {
    1: (
        "Celsius <-> Kelvin",
        (
            _Conversion("Celsius", "Kelvin", celsius_to_kelvin),
            _Conversion("Kelvin", "Celsius", kelvin_to_celsius),
        ),
    ),
    2: (
        "Fahrenheit <-> Kelvin",
        (
            _Conversion("Fahrenheit", "Kelvin", fahrenheit_to_kelvin),
            _Conversion("Kelvin", "Fahrenheit", kelvin_to_fahrenheit),
        ),
    ),
    3: (
        "Celsius <-> Fahrenheit",
        (
            _Conversion("Celsius", "Fahrenheit", celsius_to_fahrenheit),
            _Conversion("Fahrenheit", "Celsius", fahrenheit_to_celsius),
        ),
    ),
}

_BANNER = (
    "\t\t\t\t\tWelcome to Temperature Conversion!\n\n"
    "Temperature conversion formulas help you change temperature values "
    "from one unit to another.\n"
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numbercraft", description="Convert temperatures between scales."
    )
    parser.add_argument("choice", nargs="?", type=int, help="conversion type: 1, 2 or 3")
    parser.add_argument("sub_choice", nargs="?", type=int, help="direction: 1 or 2")
    parser.add_argument("value", nargs="?", type=float, help="temperature to convert")
    return parser


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _pick_type() -> int | None:
    print(_BANNER)
    print("Choose the conversion type:")
    for number, (title, _) in _MENU.items():
        print(f"{number}. {title}")
    print()
    return _ask_int("Enter your choice (1, 2, or 3): ")


def _pick_direction(conversions: tuple[_Conversion, _Conversion]) -> int | None:
    print()
    for number, conversion in enumerate(conversions, start=1):
        print(f"{number}. Convert {conversion.source} to {conversion.target}")
    return _ask_int("Enter your choice (1 or 2): ")


def _ask_value(scale: str) -> float:
    text = input(f"Enter temperature in {scale}: ")
    return float(text.strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter and return the exit status."""
    args = _parser().parse_args(argv)
    try:
        choice = args.choice if args.choice is not None else _pick_type()
        if choice not in _MENU:
            print("Invalid main choice. Please enter 1, 2, or 3.")
            return 0

        conversions = _MENU[choice][1]
        sub_choice = (
            args.sub_choice if args.sub_choice is not None else _pick_direction(conversions)
        )
        if sub_choice not in (1, 2):
            print("Invalid sub-choice. Please enter 1 or 2.")
            return 0

        conversion = conversions[sub_choice - 1]
        value = args.value if args.value is not None else _ask_value(conversion.source)
    except ValueError:
        print("Invalid temperature.", file=sys.stderr)
        return 1
    except EOFError:
        print("\nNo input given.", file=sys.stderr)
        return 1

    print(f"Temperature in {conversion.target}: {conversion.convert(value):.1f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
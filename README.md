# numbercraft

Small routines for working with numbers, digits, lists, characters and
everyday calculations. They suit teaching, exercises, and the odd script
that needs one of these checks. The package has no dependencies outside the
standard library.

## Installation

```
pip install numbercraft
```

To run the test suite as well:

```
pip install "numbercraft[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `numbercraft.digits` | `digit_count`, `digit_sum`, `even_odd_digit_sums`, `reverse_number`, `is_palindrome`, `is_armstrong`, `armstrong_numbers`, `is_strong`, `has_repeated_digit`, `binary_to_decimal`, `decimal_to_binary` |
| `numbercraft.arithmetic` | `factorial`, `fibonacci`, `greatest`, `hcf`, `lcm`, `is_leap_year`, `is_perfect`, `power`, `is_prime`, `primes_in_range`, `sum_natural`, `swap` |
| `numbercraft.arrays` | `bubble_sort`, `binary_search`, `linear_search`, `maximum`, `minimum`, `reverse`, `total` |
| `numbercraft.characters` | `ascii_value`, `ascii_table`, `classify_char`, `classify_letter`, `number_to_words`, and the `CharKind` and `LetterKind` enumerations |
| `numbercraft.calculators` | `bmi`, `bmi_category`, `simple_interest`, `compound_interest`, `calculate` |
| `numbercraft.tables` | `floyd_triangle`, `multiplication_table` |
| `numbercraft.temperature` | `celsius_to_kelvin`, `kelvin_to_celsius`, `fahrenheit_to_kelvin`, `kelvin_to_fahrenheit`, `celsius_to_fahrenheit`, `fahrenheit_to_celsius` |
| `numbercraft.cli` | `main`, the temperature converter behind the `numbercraft` command |

## Things worth knowing

- In `numbercraft.digits` the digits of a negative number carry its sign:
  `digit_sum(-123)` is `-6` and `reverse_number(-123)` is `-321`.
  `decimal_to_binary` gives `"0"` for zero and `""` for a negative number.
- `binary_to_decimal` reads the decimal digits of an integer as binary
  digits, so `binary_to_decimal(1011)` is `11`. It does not check that the
  digits are 0 or 1.
- The searches in `numbercraft.arrays` return a zero-based index, or `None`
  when the target is absent. `maximum` and `minimum` raise `ValueError` for
  an empty sequence.
- `number_to_words` covers 0 to 999 and raises `ValueError` outside that
  range. Whole hundreds keep a trailing space: `number_to_words(200)` is
  `"Two Hundred "`.
- `classify_char` returns a `CharKind`; `classify_letter` returns a
  `LetterKind` and raises `ValueError` for anything but an ASCII letter.
- `bmi_category` uses the bands below 18.5, 18.5 to 24.9 and 25.0 to 29.9;
  everything else, including values that fall between bands, is
  `"Obesity"`.
- `calculate` accepts `+`, `-`, `*` and `/`; any other operator raises
  `ValueError`, and dividing by zero raises `ZeroDivisionError`.
- `factorial` of a negative number, `is_perfect` of a number below 1 and
  `lcm` of anything but two positive integers raise `ValueError`.
- `power` takes an integer exponent and returns a float; a zero base with a
  negative exponent raises `ZeroDivisionError`.

## Examples

```python
from numbercraft.digits import is_armstrong, is_palindrome
from numbercraft.arithmetic import hcf, is_leap_year, is_prime
from numbercraft.arrays import bubble_sort
from numbercraft.characters import number_to_words
from numbercraft.temperature import celsius_to_fahrenheit

is_armstrong(153)          # True
is_palindrome(12321)       # True
hcf(12, 18)                # 6
is_leap_year(2000)         # True
is_prime(97)               # True
bubble_sort([5, 3, 1, 4])  # [1, 3, 4, 5]
number_to_words(42)        # 'Forty Two'
celsius_to_fahrenheit(100) # 212.0
```

## Command line

Installing the package provides one command, a temperature converter:

```
numbercraft [CHOICE [SUB_CHOICE [VALUE]]]
```

`CHOICE` picks the pair of scales: `1` for Celsius and Kelvin, `2` for
Fahrenheit and Kelvin, `3` for Celsius and Fahrenheit. `SUB_CHOICE` picks
the direction: `1` converts from the first scale of the pair to the second,
`2` the other way. `VALUE` is the temperature to convert. Whatever is not
given on the command line is asked for on standard input, with a menu.

```
$ numbercraft 3 1 100
Temperature in Fahrenheit: 212.0
```

The result is printed to one decimal place. An unknown choice prints a
message saying which choices are valid. A temperature that is not a number,
or input that ends early, prints an error to standard error and exits with
status 1.

The command covers temperatures only; the other modules are used from
Python and have no command of their own.
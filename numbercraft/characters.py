"""Character classification, ASCII codes and numbers spelled out in words."""

from __future__ import annotations

from enum import Enum

_UNITS = ("Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine")
_TEENS = (
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
)
_TENS = {
    2: "Twenty",
    3: "Thirty",
    4: "Forty",
    5: "Fifty",
    6: "Sixty",
    7: "Seventy",
    8: "Eighty",
    9: "Ninety",
}


class CharKind(Enum):
    """Broad class of a character."""

    ALPHABET = "alphabet"
    DIGIT = "digit"
    SPECIAL = "special character"


class LetterKind(Enum):
    """Class of an English letter."""

    VOWEL = "vowel"
    CONSONANT = "consonant"


def _single(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def ascii_value(ch: str) -> int:
    """Return the code of a single character."""
    return ord(_single(ch))


def ascii_table() -> list[tuple[str, int]]:
    """Return the printable ASCII characters with their codes, 32 to 126."""
    return [(chr(code), code) for code in range(32, 127)]


def _is_ascii_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def classify_char(ch: str) -> CharKind:
    """Tell whether ``ch`` is an ASCII letter, an ASCII digit or something else."""
    ch = _single(ch)
    if _is_ascii_letter(ch):
        return CharKind.ALPHABET
    if "0" <= ch <= "9":
        return CharKind.DIGIT
    return CharKind.SPECIAL


def classify_letter(ch: str) -> LetterKind:
    """Tell whether an ASCII letter is a vowel or a consonant.

    Raise ValueError for anything that is not an ASCII letter.
    """
    ch = _single(ch)
    if not _is_ascii_letter(ch):
        raise ValueError("Invalid input.")
    return LetterKind.VOWEL if ch.lower() in "aeiou" else LetterKind.CONSONANT


def number_to_words(number: int) -> str:
    """Spell out a number from 0 to 999 in English words.

    Whole hundreds keep the space that follows "Hundred", as in
    ``"Two Hundred "``. Raise ValueError outside 0 to 999.
    """
    if not 0 <= number <= 999:
        raise ValueError("Out of range!")
    if number == 0:
        return _UNITS[0]

    words = ""
    hundreds, rest = divmod(number, 100)
    if hundreds:
        words += f"{_UNITS[hundreds]} Hundred "
    if 10 <= rest <= 19:
        return words + _TEENS[rest - 10]
    tens, units = divmod(rest, 10)
    if tens:
        words += _TENS[tens]
        if units:
            words += " "
    if units:
        words += _UNITS[units]
    return words
import io

import pytest

from numbercraft.cli import main
from numbercraft.temperature import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


@pytest.mark.parametrize(
    "choice, sub_choice, target, convert",
    [
        ("1", "1", "Kelvin", celsius_to_kelvin),
        ("1", "2", "Celsius", kelvin_to_celsius),
        ("2", "1", "Kelvin", fahrenheit_to_kelvin),
        ("2", "2", "Fahrenheit", kelvin_to_fahrenheit),
        ("3", "1", "Fahrenheit", celsius_to_fahrenheit),
        ("3", "2", "Celsius", fahrenheit_to_celsius),
    ],
)
def test_every_conversion_from_arguments(capsys, choice, sub_choice, target, convert):
    status = main([choice, sub_choice, "100"])
    out = capsys.readouterr().out
    assert status == 0
    assert out == f"Temperature in {target}: {convert(100.0):.1f}\n"


def test_kelvin_offset_prints_zero_celsius(capsys):
    assert main(["1", "2", "273.15"]) == 0
    assert capsys.readouterr().out == "Temperature in Celsius: 0.0\n"


def test_negative_temperature_argument(capsys):
    assert main(["3", "1", "-40"]) == 0
    assert "Temperature in Fahrenheit: -40.0" in capsys.readouterr().out


def test_invalid_main_choice(capsys):
    assert main(["4"]) == 0
    assert "Invalid main choice. Please enter 1, 2, or 3." in capsys.readouterr().out


def test_invalid_sub_choice(capsys):
    assert main(["2", "3"]) == 0
    assert "Invalid sub-choice. Please enter 1 or 2." in capsys.readouterr().out


def test_interactive_session(monkeypatch, capsys):
    _feed(monkeypatch, "2\n1\n32\n")
    status = main([])
    out = capsys.readouterr().out
    assert status == 0
    assert "Welcome to Temperature Conversion!" in out
    assert "2. Fahrenheit <-> Kelvin" in out
    assert "1. Convert Fahrenheit to Kelvin" in out
    assert "Enter temperature in Fahrenheit: " in out
    assert out.endswith(f"Temperature in Kelvin: {fahrenheit_to_kelvin(32.0):.1f}\n")


def test_interactive_prompts_only_for_missing_values(monkeypatch, capsys):
    _feed(monkeypatch, "212\n")
    assert main(["3", "2"]) == 0
    out = capsys.readouterr().out
    assert "Welcome" not in out
    assert "Enter temperature in Fahrenheit: " in out
    assert f"Temperature in Celsius: {fahrenheit_to_celsius(212.0):.1f}" in out


def test_non_numeric_choice_is_invalid(monkeypatch, capsys):
    _feed(monkeypatch, "x\n")
    assert main([]) == 0
    assert "Invalid main choice. Please enter 1, 2, or 3." in capsys.readouterr().out


def test_non_numeric_temperature_fails(monkeypatch, capsys):
    _feed(monkeypatch, "1\n1\nabc\n")
    assert main([]) == 1
    assert "Invalid temperature." in capsys.readouterr().err


def test_end_of_input_fails(monkeypatch, capsys):
    _feed(monkeypatch, "")
    assert main([]) == 1
    assert "No input given." in capsys.readouterr().err


def test_main_without_arguments_reads_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["numbercraft"])
    _feed(monkeypatch, "1\n1\n0\n")
    assert main() == 0
    out = capsys.readouterr().out
    assert out.endswith(f"Temperature in Kelvin: {celsius_to_kelvin(0.0):.1f}\n")
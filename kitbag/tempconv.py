"""Celsius and Fahrenheit temperatures and conversions between them."""

from __future__ import annotations

import argparse
import math
import sys
from decimal import Decimal


def _format_g(x: float) -> str:
    """Format ``x`` with the shortest digits that round-trip, %g style."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(float(x))).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    mantissa = "".join(map(str, digits))
    exp10 = len(mantissa) + exponent - 1
    prefix = "-" if sign else ""
    if exp10 < -4 or exp10 >= 6:
        body = mantissa[0] + ("." + mantissa[1:] if len(mantissa) > 1 else "")
        return f"{prefix}{body}e{'-' if exp10 < 0 else '+'}{abs(exp10):02d}"
    if exp10 >= len(mantissa) - 1:
        body = mantissa + "0" * (exp10 - len(mantissa) + 1)
    elif exp10 >= 0:
        body = mantissa[: exp10 + 1] + "." + mantissa[exp10 + 1 :]
    else:
        body = "0." + "0" * (-exp10 - 1) + mantissa
    return prefix + body


class Celsius(float):
    """A temperature in degrees Celsius."""

    def __str__(self) -> str:
        return f"{_format_g(self)}°C"

    def __repr__(self) -> str:
        return f"Celsius({_format_g(self)})"

    def __format__(self, spec: str) -> str:
        return str(self) if not spec else float.__format__(self, spec)


class Fahrenheit(float):
    """A temperature in degrees Fahrenheit."""

    def __str__(self) -> str:
        return f"{_format_g(self)}°F"

    def __repr__(self) -> str:
        return f"Fahrenheit({_format_g(self)})"

    def __format__(self, spec: str) -> str:
        return str(self) if not spec else float.__format__(self, spec)


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def _parse_float(arg: str) -> float:
    if arg != arg.strip() or "_" in arg:
        raise ValueError(f'strconv.ParseFloat: parsing "{arg}": invalid syntax')
    try:
        return float(arg)
    except ValueError:
        raise ValueError(
            f'strconv.ParseFloat: parsing "{arg}": invalid syntax'
        ) from None


def _boiling_report() -> str:
    f = Fahrenheit(212.0)
    return f"boiling point = {f} or {f_to_c(f)}"


def _ftoc_report() -> list[str]:
    return [f"{Fahrenheit(f)} = {f_to_c(f)}" for f in (32.0, 212.0)]


def main(argv: list[str] | None = None) -> int:
    """Convert each numeric argument to Celsius and Fahrenheit."""
    parser = argparse.ArgumentParser(
        prog="cf", description="Convert temperatures between Celsius and Fahrenheit."
    )
    parser.add_argument(
        "--boiling", action="store_true", help="print the boiling point of water"
    )
    parser.add_argument(
        "--ftoc", action="store_true", help="print two Fahrenheit-to-Celsius conversions"
    )
    parser.add_argument("values", nargs="*")
    options = parser.parse_args(argv)

    if options.boiling:
        print(_boiling_report())
    if options.ftoc:
        for line in _ftoc_report():
            print(line)
    for arg in options.values:
        try:
            t = _parse_float(arg)
        except ValueError as err:
            print(f"cf: {err}", file=sys.stderr)
            return 1
        f, c = Fahrenheit(t), Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
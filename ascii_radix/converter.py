# converter.py
from dataclasses import dataclass
from typing import Tuple

from .number_system import HEX_DIGITS, MIN_WIDTHS, Radix


@dataclass(frozen=True)
class ConversionResult:
    value: str
    steps: Tuple[str, ...]
    radix: Radix


@dataclass(frozen=True)
class ReconstructionResult:
    result: int
    expression: str
    contributions: str


def decimal_to_base(decimal: int, radix: Radix) -> ConversionResult:
    """
    Converts `decimal` to `radix` by repeated division.
    Each division adds one line to `steps`, e.g. "65 : 16 = 4 // 1".
    Zero returns "0" as-is, without the minimum width padding.
    Negative values are not checked: no division runs, so the value comes
    back as a string of zeros with no steps.
    """
    if decimal == 0:
        return ConversionResult("0", ("0",), radix)

    base = int(radix)
    digits = ""
    steps = []
    number = decimal

    while number > 0:
        quotient, remainder = divmod(number, base)
        digit = HEX_DIGITS[remainder]
        steps.append(f"{number} : {base} = {quotient} // {digit}")
        digits = digit + digits
        number = quotient

    return ConversionResult(digits.rjust(MIN_WIDTHS[radix], "0"), tuple(steps), radix)


def _digit_value(char, radix):
    if radix == Radix.HEXADECIMAL:
        # anything outside 0-9 / A-F / a-f counts as 0
        index = HEX_DIGITS.find(char.upper()) if char.isascii() else -1
        return index if index >= 0 else 0
    return ord(char) - ord("0")


def base_to_decimal(digits: str, radix: Radix) -> ReconstructionResult:
    """
    Rebuilds the decimal value of `digits`, returning the weighted sum as
    "(d * r^p) + ..." and the term values as "v + ...".

    The digits are NOT validated against the radix, a "9" in binary just
    contributes 9 * 2^p.
    """
    base = int(radix)
    decimal = 0
    terms = []
    contributions = []

    for i, char in enumerate(digits):
        digit_value = _digit_value(char, radix)
        power = len(digits) - 1 - i
        contribution = digit_value * base ** power

        terms.append(f"({digit_value} * {base}^{power})")
        contributions.append(contribution)
        decimal += contribution

    return ReconstructionResult(
        decimal,
        " + ".join(terms),
        " + ".join(str(c) for c in contributions),
    )

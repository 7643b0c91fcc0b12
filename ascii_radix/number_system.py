# number_system.py
from enum import IntEnum
from types import MappingProxyType


class Radix(IntEnum):
    BINARY = 2
    OCTAL = 8
    HEXADECIMAL = 16

    @property
    def display_name(self):
        return self.name.capitalize()


HEX_DIGITS = "0123456789ABCDEF"

# Minimum digit count for nonzero values, 8 bits for binary
MIN_WIDTHS = MappingProxyType({
    Radix.BINARY: 8,
    Radix.OCTAL: 3,
    Radix.HEXADECIMAL: 2,
})

MAX_CODE_VALUE = 0xFF

# Printable ASCII, space through tilde
PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E

RULE_LINE = "-" * 70


def is_printable(code):
    return PRINTABLE_MIN <= code <= PRINTABLE_MAX

# __init__.py
from .number_system import Radix, MIN_WIDTHS, HEX_DIGITS
from .converter import ConversionResult, ReconstructionResult, decimal_to_base, base_to_decimal
from .text_processor import (
    ASCIIConverter,
    CharacterConversion,
    SkippedCharacter,
    convert_character,
    process_text,
)

__version__ = "1.0.0"

# text_processor.py
from dataclasses import dataclass
from typing import List, Union

from .converter import ConversionResult, base_to_decimal, decimal_to_base
from .number_system import MAX_CODE_VALUE, RULE_LINE, Radix, is_printable
from .print_utils import print_lines, print_message


@dataclass(frozen=True)
class CharacterConversion:
    character: str
    code: int
    binary: ConversionResult
    octal: ConversionResult
    hexadecimal: ConversionResult

    @property
    def conversions(self):
        return (self.binary, self.octal, self.hexadecimal)

    @property
    def annotation(self):
        return self.character if is_printable(self.code) else "non-printable"


@dataclass(frozen=True)
class SkippedCharacter:
    character: str
    code: int

    @property
    def warning(self):
        return f"Warning: Character '{self.character}' is not in ASCII range"


Outcome = Union[CharacterConversion, SkippedCharacter]


def convert_character(character: str) -> Outcome:
    code = ord(character)
    if code > MAX_CODE_VALUE:
        return SkippedCharacter(character, code)

    return CharacterConversion(
        character,
        code,
        decimal_to_base(code, Radix.BINARY),
        decimal_to_base(code, Radix.OCTAL),
        decimal_to_base(code, Radix.HEXADECIMAL),
    )


def process_text(text: str) -> List[Outcome]:
    return [convert_character(c) for c in text]


def format_base_conversion(record: CharacterConversion, conversion: ConversionResult) -> List[str]:
    name = conversion.radix.display_name
    c = record.character
    reconstruction = base_to_decimal(conversion.value, conversion.radix)

    lines = [f"Formula to convert Decimal {record.code} ({c}) to {name}:"]
    lines.extend(conversion.steps)
    lines.append("")
    lines.append(f"Formula to convert {name} {conversion.value} ({c}) back to Decimal:")
    lines.append(f"{conversion.value} = {reconstruction.expression}")
    lines.append(f"         = {reconstruction.contributions}")
    lines.append(f"         = {reconstruction.result} ({chr(reconstruction.result)})")
    lines.append("")
    return lines


def format_conversion_block(record: CharacterConversion) -> List[str]:
    lines = [RULE_LINE]
    for conversion in record.conversions:
        lines.extend(format_base_conversion(record, conversion))
    return lines


def format_value_set(label, values, records):
    entries = "".join(f"{value} ({record.annotation}) " for value, record in zip(values, records))
    return f"{label}: {entries}"


def format_summary(records: List[CharacterConversion]) -> List[str]:
    """
    Final table, one line per base. Each value is annotated with the
    character it came from, skipped characters are already filtered out.
    """
    return [
        "",
        "Final Results:",
        format_value_set("Decimal", [str(r.code) for r in records], records),
        format_value_set("Binary", [r.binary.value for r in records], records),
        format_value_set("Octal", [r.octal.value for r in records], records),
        format_value_set("Hexadecimal", [r.hexadecimal.value for r in records], records),
    ]


class ASCIIConverter:
    def __init__(self, text):
        self.text = text

    def process(self, stream=None):
        outcomes = process_text(self.text)
        records = []

        for outcome in outcomes:
            if isinstance(outcome, SkippedCharacter):
                print_message(outcome.warning, color="yellow", stream=stream)
                continue
            records.append(outcome)
            print_lines(format_conversion_block(outcome), stream=stream)

        print_lines(format_summary(records), stream=stream)
        return outcomes

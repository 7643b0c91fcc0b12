# cli.py
import argparse

from . import __version__
from .print_utils import print_message
from .text_processor import ASCIIConverter

PROMPT = "Enter ASCII: "
EMPTY_INPUT_ERROR = "Error: Input cannot be empty!"


def read_text(prompt=input, stream=None):
    """
    Prompts until a non-empty line is entered.
    Returns None if input runs out before that.
    """
    while True:
        try:
            text = prompt(PROMPT)
        except EOFError:
            return None
        if text:
            return text
        print_message(EMPTY_INPUT_ERROR, color="red", stream=stream)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ascii-radix",
        description="Show how each character's code converts to binary, octal and hexadecimal, step by step",
    )
    parser.add_argument("text", nargs="?",
                        help="Text to convert (prompted for when omitted)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None, prompt=input, stream=None):
    args = build_parser().parse_args(argv)

    text = args.text
    if text == "":
        print_message(EMPTY_INPUT_ERROR, color="red", stream=stream)

    try:
        if not text:
            text = read_text(prompt, stream=stream)
    except KeyboardInterrupt:
        print("\nExiting.", file=stream)
        return 0

    if text is None:
        print("\nExiting.", file=stream)
        return 0

    print(f"\nConverting ASCII '{text}' to Decimal, Binary, Octal, and Hexadecimal!\n", file=stream)
    ASCIIConverter(text).process(stream=stream)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

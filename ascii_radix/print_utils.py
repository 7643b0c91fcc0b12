# print_utils.py
import sys

COLOR_CODES = {
    "red": "\033[91m",
    "green": "\033[92m",
    "yellow": "\033[93m",
    "blue": "\033[94m",
    "cyan": "\033[96m",
    "reset": "\033[0m"
}


def colorize(text, color, stream=None):
    """
    Wraps text in an ANSI color, only when `stream` is a terminal.
    """
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    if not (isatty and isatty()):
        return text

    color_code = COLOR_CODES.get(color, "")
    reset_code = COLOR_CODES["reset"] if color_code else ""
    return f"{color_code}{text}{reset_code}"


def print_message(text, color="yellow", stream=None):
    print(colorize(text, color, stream), file=stream)


def print_lines(lines, stream=None):
    for line in lines:
        print(line, file=stream)

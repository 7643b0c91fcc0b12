from ascii_radix.cli import EMPTY_INPUT_ERROR, PROMPT, main, read_text
from ascii_radix.print_utils import colorize


def _prompter(lines):
    answers = iter(lines)
    prompts = []

    def prompt(text):
        prompts.append(text)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    prompt.prompts = prompts
    return prompt


def test_read_text_reprompts_on_empty(capsys):
    prompt = _prompter(["", "", "Hi"])
    assert read_text(prompt) == "Hi"
    assert prompt.prompts == [PROMPT] * 3
    assert capsys.readouterr().out.count(EMPTY_INPUT_ERROR) == 2


def test_read_text_end_of_input():
    assert read_text(_prompter([])) is None


def test_main_with_prompt(capsys):
    assert main([], prompt=_prompter(["A"])) == 0
    out = capsys.readouterr().out
    assert "Converting ASCII 'A' to Decimal, Binary, Octal, and Hexadecimal!" in out
    assert "Decimal: 65 (A) " in out


def test_main_with_argument(capsys):
    assert main(["Ok"]) == 0
    out = capsys.readouterr().out
    assert "Hexadecimal: 4F (O) 6B (k) " in out


def test_main_empty_argument_falls_back_to_prompt(capsys):
    prompt = _prompter(["z"])
    assert main([""], prompt=prompt) == 0
    out = capsys.readouterr().out
    assert EMPTY_INPUT_ERROR in out
    assert prompt.prompts == [PROMPT]
    assert "122 (z)" in out


def test_main_end_of_input_still_succeeds(capsys):
    assert main([], prompt=_prompter([])) == 0
    assert "Exiting." in capsys.readouterr().out


def test_main_keyboard_interrupt(capsys):
    def prompt(text):
        raise KeyboardInterrupt

    assert main([], prompt=prompt) == 0
    assert "Exiting." in capsys.readouterr().out


def test_colorize_only_on_terminal():
    class Tty:
        def isatty(self):
            return True

    class Pipe:
        def isatty(self):
            return False

    assert colorize("x", "red", Tty()) == "\033[91mx\033[0m"
    assert colorize("x", "red", Pipe()) == "x"

from decimal import Decimal, InvalidOperation
from typing import Callable

NOT_A_NUMBER = "Invalid input. Please enter a number."
NOT_A_WHOLE_NUMBER = "Invalid input. Please enter a whole number."
NOT_NUMERIC = "Invalid input. Please enter a numeric value."
NEGATIVE_VALUE = "Value cannot be negative. Please try again."


def _numeric_text(line: str) -> str:
    """Strips the line and rejects forms a plain keyboard number never takes."""
    text = line.strip()
    if not text.isascii() or "_" in text:
        raise ValueError(f"not a plain number: {text!r}")
    return text


class ConsolePrompter:
    """
    Line-based prompts that keep asking until the answer is usable.

    `input_func` receives the prompt text and returns one line without the
    trailing newline, like the built-in `input`. End of input surfaces as
    EOFError to the caller.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        print_func: Callable[..., None] = print,
    ):
        self.input_func = input_func
        self.print_func = print_func

    def say(self, message: str = "") -> None:
        self.print_func(message)

    def read_text(self, prompt: str) -> str:
        return self.input_func(prompt)

    def read_choice(self, prompt: str) -> int:
        """Reads any integer, used for menu selections."""
        while True:
            try:
                return int(_numeric_text(self.input_func(prompt)))
            except ValueError:
                self.say(NOT_A_NUMBER)

    def read_int(self, prompt: str) -> int:
        """Reads a whole number that is zero or more."""
        while True:
            try:
                value = int(_numeric_text(self.input_func(prompt)))
            except ValueError:
                self.say(NOT_A_WHOLE_NUMBER)
                continue
            if value < 0:
                self.say(NEGATIVE_VALUE)
            else:
                return value

    def read_decimal(self, prompt: str) -> Decimal:
        """Reads a finite decimal amount that is zero or more."""
        while True:
            try:
                value = Decimal(_numeric_text(self.input_func(prompt)))
            except (InvalidOperation, ValueError):
                self.say(NOT_NUMERIC)
                continue
            if not value.is_finite():
                self.say(NOT_NUMERIC)
            elif value < 0:
                self.say(NEGATIVE_VALUE)
            else:
                # "-0" passes the sign check; store it as plain zero.
                return value.copy_abs()

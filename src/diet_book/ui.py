"""Line-based text interface over injected streams."""

from dataclasses import dataclass
from typing import TextIO

from diet_book.services.session import LoadStatus

DIVIDER = "_" * 60
LOGO = r"""
  ____  _      _   ____              _
 |  _ \(_) ___| |_| __ )  ___   ___ | | __
 | | | | |/ _ \ __|  _ \ / _ \ / _ \| |/ /
 | |_| | |  __/ |_| |_) | (_) | (_) |   <
 |____/|_|\___|\__|____/ \___/ \___/|_|\_\
"""


@dataclass
class Ui:
    """Reads commands and prints replies."""

    input_stream: TextIO
    output_stream: TextIO

    def get_command(self) -> str | None:
        """Return the next typed line, or None once input is exhausted."""
        self.output_stream.write("> ")
        self.output_stream.flush()
        line = self.input_stream.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def print_message(self, message: str) -> None:
        self.output_stream.write(f"{message}\n")

    def print_error_message(self, message: str) -> None:
        self.print_message(f"{DIVIDER}\n{message}\n{DIVIDER}")

    def print_food_list(self, food_list: str) -> None:
        self.print_message(f"Here are the foods you have eaten:\n{food_list.rstrip()}")

    def print_greeting(self, status: LoadStatus, name: str) -> None:
        """Welcome a new user, or greet a returning one by name."""
        if status is LoadStatus.RESTORED:
            greeting = f"Welcome back {name}!" if name else "Welcome back!"
            self.print_message(f"{LOGO}\n{greeting} What did you eat today?")
            return
        self.print_message(
            f"{LOGO}\nHello! I'm DietBook, your diet diary."
            "\nSet up your profile with 'info' or type 'help' to see what I can do."
        )

    def print_goodbye_message(self) -> None:
        self.print_message("Your data has been saved. Goodbye, see you soon!")

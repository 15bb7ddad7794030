"""
handlers/console.py
-------------------
Thin wrapper around terminal input/output.
Handlers talk to a Console instead of calling input()/print() directly,
so the menu flows can be driven by scripted input in tests.
"""

import os
from typing import Callable, Optional

from utils.validators import is_confirmation, parse_int


class Console:
    """Prompt, read and print on behalf of the menu handlers."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clear_screen: bool = True,
    ):
        self._input = input_fn
        self._output = output_fn
        self._clear_screen = clear_screen

    def show(self, text: str = "") -> None:
        self._output(text)

    def ask(self, prompt: str) -> str:
        """Read one trimmed line."""
        return self._input(prompt).strip()

    def ask_int(self, prompt: str, empty_message: Optional[str] = None) -> int:
        """Read a whole number, re-prompting until one is entered."""
        while True:
            raw = self.ask(prompt)
            if not raw and empty_message:
                self.show(empty_message)
                continue
            value = parse_int(raw)
            if value is not None:
                return value
            self.show("Please enter a valid number.")

    def confirm(self, prompt: str) -> bool:
        return is_confirmation(self.ask(prompt))

    def pause(self) -> None:
        self.show("\nPress Enter to continue...")
        self._input("")
        self.clear()

    def clear(self) -> None:
        if not self._clear_screen:
            return
        os.system("cls" if os.name == "nt" else "clear")

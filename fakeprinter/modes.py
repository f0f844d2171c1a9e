"""How the printer interacts with its operator between layers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class UserMode(ABC):
    """Decides whether printing continues and reacts to layer errors."""

    def __init__(self) -> None:
        self._stop_printing = False

    @abstractmethod
    def start(self, filename: str) -> None:
        """Announce that printing of ``filename`` begins."""

    @abstractmethod
    def get_user_input(self) -> None:
        """Collect input from the operator."""

    @abstractmethod
    def encountered_error(self) -> None:
        """React to a layer that reported an error."""

    @abstractmethod
    def continue_print(self) -> None:
        """Wait until the next layer may be printed."""

    def stop_printing(self) -> bool:
        """Return True once printing has been asked to stop."""
        return self._stop_printing

    def update_print_status(self, status: bool) -> None:
        self._stop_printing = status


class SupervisedMode(UserMode):
    """Asks the operator to confirm each layer and decide on errors."""

    def __init__(
        self, input_stream: TextIO | None = None, output_stream: TextIO | None = None
    ) -> None:
        super().__init__()
        self._input = input_stream
        self._output = output_stream

    def _say(self, message: str) -> None:
        print(message, file=self._output or sys.stdout, flush=True)

    def _read_line(self) -> str:
        line = (self._input or sys.stdin).readline()
        if line == "":
            raise EOFError("input ended while waiting for the operator")
        return line.removesuffix("\n")

    def continue_print(self) -> None:
        self._say("Inspect layer + Hit Enter to continue")
        while True:
            try:
                answer = self._read_line()
            except EOFError:
                answer = ""
            if not answer:
                self._say("Printing next layer")
                return
            self._say("Invalid input. Please hit enter to continue")

    def encountered_error(self) -> None:
        while True:
            self._say("Error Encountered: Do you want to stop printing? [y/n]")
            answer = self._read_line()
            choice = answer[:1].lower()
            if choice == "y":
                self._say("You chose Yes")
                self.update_print_status(True)
                return
            if choice == "n":
                self._say("You chose No")
                self.update_print_status(False)
                return
            self._say("Invalid input. Please enter [y/n]")

    def start(self, filename: str) -> None:
        self._say(f"Supervised Start: Printing file {filename}")

    def get_user_input(self) -> None:
        self._say("Supervised GetUserInput")


class AutomaticMode(UserMode):
    """Prints every layer without asking the operator."""

    def __init__(self, output_stream: TextIO | None = None) -> None:
        super().__init__()
        self._output = output_stream

    def _say(self, message: str) -> None:
        print(message, file=self._output or sys.stdout, flush=True)

    def encountered_error(self) -> None:
        self._say("Error Encountered: Stopping printing immediately")
        self.update_print_status(False)

    def continue_print(self) -> None:
        self._say("Auto Mode: Continuing without user input")

    def start(self, filename: str) -> None:
        self._say(f"Automatic Start: Printing file {filename}")

    def get_user_input(self) -> None:
        self._say("Automatic GetUserInput")
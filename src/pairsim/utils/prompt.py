"""Interactive prompts used when the command line does not name a directory."""

from pathlib import Path
from typing import Callable, TextIO

from .selection import FileSelection

DIRECTORY_PROMPT = "Enter the file's directory. The program will scan subdirectories as well: "
EXTENSIONS_PROMPT = "Enter space delimited file extensions or leave blank for all: "
NAMES_PROMPT = "Enter space delimited file names or leave blank for all: "


class Prompter:
    """Asks the operator for the scan root and the filename filters.

    Args:
        read_line: Reads one answer after displaying a prompt (default: input).
                   Raises EOFError when no more input is available.
        output: Stream receiving validation messages
    """

    def __init__(self, read_line: Callable[[str], str] | None = None, output: TextIO | None = None):
        self._read_line = read_line or input
        self._output = output

    def ask_directory(self) -> Path:
        """Prompt until an existing directory is entered."""
        while True:
            answer = self._read_line(DIRECTORY_PROMPT)
            if answer and Path(answer).is_dir():
                return Path(answer)
            print(f"'{answer}' is not a valid directory", file=self._output)

    def ask_selection(self) -> FileSelection:
        extensions = self._read_line(EXTENSIONS_PROMPT)
        names = self._read_line(NAMES_PROMPT)
        return FileSelection.from_input(extensions, names)

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional


ALLOWED_MODES = ("f", "c", "dbg")
DEFAULT_COMMANDS_FILE = "commands.txt"
END_OF_INPUT = "end"

DEBUG_COMMANDS = [
    "PLACE 1,2,EAST",
    "MOVE",
    "MOVE",
    "LEFT",
    "MOVE",
    "REPORT",
]


class CommandSource(ABC):
    """Where the raw command lines of a run come from."""

    @abstractmethod
    def get_commands(self) -> List[str]:
        """Return the raw command lines, in order."""


class DebugCommandSource(CommandSource):
    """Fixed sample program, handy for a quick demo."""

    def get_commands(self) -> List[str]:
        return list(DEBUG_COMMANDS)


class FileCommandSource(CommandSource):
    """One command per line of a UTF-8 text file."""

    def __init__(self, path: str = DEFAULT_COMMANDS_FILE) -> None:
        self.path = path

    def get_commands(self) -> List[str]:
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read().splitlines()


class ConsoleCommandSource(CommandSource):
    """Interactive input, terminated by ``END`` or end of input."""

    def __init__(
        self,
        read_line: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.read_line = read_line if read_line is not None else input
        self.write = write if write is not None else print

    def get_commands(self) -> List[str]:
        self.write('Start entering commands. Use "END" to stop the input.')
        commands: List[str] = []
        while True:
            try:
                command = self.read_line()
            except EOFError:
                break
            if command.strip().lower() == END_OF_INPUT:
                break
            commands.append(command)
        return commands


def is_valid_mode(mode: Optional[str]) -> bool:
    return mode is not None and mode.strip().lower() in ALLOWED_MODES


def make_source(mode: str, commands_file: str = DEFAULT_COMMANDS_FILE) -> CommandSource:
    """Create the command source for a retrieval mode: ``f``, ``c`` or ``dbg``."""
    if not is_valid_mode(mode):
        raise ValueError(f"Mode {mode!r} is not supported; expected one of {ALLOWED_MODES}")
    key = mode.strip().lower()
    if key == "dbg":
        return DebugCommandSource()
    if key == "f":
        return FileCommandSource(commands_file)
    return ConsoleCommandSource()

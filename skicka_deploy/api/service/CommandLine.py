"""Argument vector for the skicka binary."""

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class FileContents:
    """An argument whose value is the contents of ``path`` at the moment the command runs."""

    path: Path


Token = Union[str, FileContents]


@dataclass(frozen=True)
class CommandLine:
    """Ordered arguments, starting with the executable path."""

    args: tuple[Token, ...]

    @property
    def executable(self) -> str:
        first = self.args[0]
        if not isinstance(first, str):
            raise TypeError("The executable must be a literal argument")
        return first

    def flags(self) -> list[str]:
        """Names of the flags present, in order."""
        return [arg for arg in self.args[1:] if isinstance(arg, str) and arg.startswith("--")]

    def render_shell(self) -> str:
        """Render POSIX shell that execs the command.

        Each file argument is read into a variable first. A sentinel character is
        appended inside the command substitution and stripped afterwards so the file's
        trailing line terminators reach the binary intact.
        """
        lines: list[str] = []
        words: list[str] = []
        for index, arg in enumerate(self.args):
            if isinstance(arg, FileContents):
                var = f"arg{index}"
                lines.append(f'{var}="$(cat -- {shlex.quote(str(arg.path))}; printf .)"')
                words.append(f'"${{{var}%.}}"')
            else:
                words.append(shlex.quote(arg))
        lines.append("exec " + " ".join(words))
        return "\n".join(lines)

    def materialize(self) -> list[str]:
        """Read file arguments now and return the argv the binary receives.

        Raises:
            FileNotFoundError: If a referenced file does not exist
        """
        argv: list[str] = []
        for arg in self.args:
            if isinstance(arg, FileContents):
                argv.append(arg.path.read_bytes().decode("utf-8"))
            else:
                argv.append(arg)
        return argv

"""Build the skicka command line from the service options."""

from collections.abc import Callable
from pathlib import Path

from .CommandLine import CommandLine, FileContents, Token
from .ServiceConfig import ServiceConfig

# (predicate, flag, value producer), evaluated in this order.
# A flag is emitted only when its predicate holds, so unset and empty options never
# show up as flags with empty values.
_FLAG_TABLE: tuple[
    tuple[Callable[[ServiceConfig], bool], str, Callable[[ServiceConfig, Path | None], Token]], ...
] = (
    (lambda c: bool(c.listen), "--listen", lambda c, _motto_path: c.listen),  # type: ignore[return-value]
    (lambda c: bool(c.remote), "--remote", lambda c, _motto_path: c.remote),  # type: ignore[return-value]
    (lambda c: bool(c.motto), "--motto", lambda _c, motto_path: FileContents(motto_path)),  # type: ignore[arg-type]
)


def assemble_command(config: ServiceConfig, binary_path: Path, motto_path: Path | None = None) -> CommandLine:
    """Assemble the argument vector.

    Args:
        config: Service options
        binary_path: Resolved skicka executable
        motto_path: Prepared motto file; required when ``config.motto`` is non-empty

    Raises:
        ValueError: If a motto is configured but no motto file was given
    """
    if config.motto and motto_path is None:
        raise ValueError("A motto is configured but no motto file path was given")

    args: list[Token] = [str(binary_path)]
    for predicate, flag, value in _FLAG_TABLE:
        if predicate(config):
            args.extend((flag, value(config, motto_path)))
    return CommandLine(args=tuple(args))

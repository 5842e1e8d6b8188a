"""Complete help text for flag sets and commands."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, TextIO

from .flagformat import FlagSetLike
from .section import (
    Section,
    new_flags_sections,
    new_section,
    new_subcommands_section,
    new_untitled_section,
)


class _CommandLike(Protocol):
    name: str
    usage: str
    short_help: str
    long_help: str
    flags: Optional[FlagSetLike]
    subcommands: Sequence[Any]

    def get_selected(self) -> Optional["_CommandLike"]:
        """Return the terminal command selected by parsing, if any."""


class Help(list):
    """Help output: a list of sections separated by blank lines."""

    def __str__(self) -> str:
        return "\n".join(str(section) for section in self)

    def write_to(self, stream: TextIO) -> int:
        """Write the help text; return characters written."""
        text = str(self)
        stream.write(text)
        return len(text)


def flags_help(flags: FlagSetLike, *usage: str) -> Help:
    """Default help for a flag set: NAME, optional USAGE lines, then FLAGS."""
    help_ = Help([new_section("NAME", flags.name)])
    if usage:
        help_.append(new_section("USAGE", *usage))
    help_.extend(new_flags_sections(flags))
    return help_


def command_help(command: _CommandLike) -> Help:
    """Default help for a command, or for its selected subcommand after parsing."""
    selected = command.get_selected()
    if selected is not None:
        command = selected

    title = command.name
    if command.short_help:
        title = f"{title} -- {command.short_help}"
    help_ = Help([new_section("COMMAND", title)])

    if command.usage:
        help_.append(new_section("USAGE", command.usage))
    if command.long_help:
        help_.append(new_untitled_section(command.long_help))
    if command.subcommands:
        help_.append(new_subcommands_section(command.subcommands))
    if command.flags is not None:
        help_.extend(new_flags_sections(command.flags))
    return help_
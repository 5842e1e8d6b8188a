"""Sections of help text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, TextIO

from .flagformat import FlagSetLike, make_flag_spec

DEFAULT_LINE_PREFIX = "  "
"""Line prefix used by the section constructors in this module."""

_PADDING = 3


def _ensure_newline(s: str) -> str:
    return s.removesuffix("\n") + "\n"


def _tabulate(text: str, padding: int = _PADDING) -> str:
    """Align tab-terminated cells into columns padded with spaces.

    A line's last cell never takes part in column widths; a column's width
    is set by each run of consecutive lines that have a cell in it.
    """
    lines = [line.split("\t") for line in text.split("\n")]
    out: list[str] = []
    widths: list[int] = []

    def write_lines(start: int, end: int) -> None:
        for i in range(start, end):
            for j, cell in enumerate(lines[i]):
                out.append(cell)
                if j < len(widths):
                    out.append(" " * (widths[j] - len(cell)))
            if i + 1 < len(lines):
                out.append("\n")

    def format_block(line0: int, line1: int) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(lines[this]) - 1:
                this += 1
                continue
            write_lines(line0, this)
            line0 = this
            width = 0
            while this < line1 and column < len(lines[this]) - 1:
                width = max(width, len(lines[this][column]) + padding)
                this += 1
            widths.append(width)
            format_block(line0, this)
            widths.pop()
            line0 = this
        write_lines(line0, line1)

    format_block(0, len(lines))
    return "".join(out)


@dataclass
class Section:
    """A block of help text: an optional title and prefixed lines.

    With line_columns, each line is a tab-delimited set of fields that is
    laid out in aligned columns.
    """

    title: str = ""
    lines: list[str] = field(default_factory=list)
    line_prefix: str = ""
    line_columns: bool = False

    def _render(self) -> str:
        head = _ensure_newline(self.title) if self.title else ""
        body = "".join(_ensure_newline(self.line_prefix + line) for line in self.lines)
        if self.line_columns:
            body = _tabulate(body)
        return head + body

    def write_to(self, stream: TextIO) -> int:
        """Write the section, always ending in a newline; return characters written."""
        text = self._render()
        stream.write(text)
        return len(text)

    def __str__(self) -> str:
        return self._render()


def new_section(title: str, *lines: str) -> Section:
    """A section with the given title and lines, using DEFAULT_LINE_PREFIX."""
    return Section(title=title, lines=list(lines), line_prefix=DEFAULT_LINE_PREFIX)


def new_untitled_section(*lines: str) -> Section:
    """A section without a title or line prefix."""
    return Section(lines=list(lines))


def _new_flag_sections(
    flags: FlagSetLike,
    *,
    single_section: bool = False,
    always_subtitle: bool = False,
    shared_alignment: bool = False,
) -> list[Section]:
    groups: dict[str, list[Any]] = {}
    for flag in flags.walk_flags():
        parent = flags.name if single_section else flag.flag_set.name
        groups.setdefault(parent, []).append(flag)

    chunks = ["".join(str(make_flag_spec(f)) for f in group) for group in groups.values()]
    if shared_alignment:
        rendered = _tabulate("".join(chunks))
    else:
        rendered = "".join(_tabulate(chunk) for chunk in chunks)
    lines = [line for line in rendered.split("\n") if line]

    sections: list[Section] = []
    for name, group in groups.items():
        if len(lines) < len(group):
            raise RuntimeError(
                f"{name}: flag count {len(group)}, remaining section line count {len(lines)}"
            )
        title = "FLAGS"
        if always_subtitle or len(groups) > 1:
            title = f"{title} ({name})"
        sections.append(
            Section(title=title, lines=lines[: len(group)], line_prefix=DEFAULT_LINE_PREFIX)
        )
        lines = lines[len(group) :]

    min_one = -1
    min_all = -1
    for section in sections:
        for line in section.lines:
            index = len(line) - len(line.lstrip(" "))
            if min_one < 0 or index < min_one:
                min_one = index
            elif min_all < 0 or index < min_all:
                min_all = index
        if min_one > 0 and not shared_alignment:
            section.lines = [line[min_one:] for line in section.lines]
    if min_all > 0 and shared_alignment:
        for section in sections:
            section.lines = [line[min_one:] for line in section.lines]

    return sections


def new_flags_section(flags: FlagSetLike) -> Section:
    """A single FLAGS section holding every flag available to flags."""
    sections = _new_flag_sections(flags, single_section=True)
    if len(sections) != 1:
        raise ValueError(f"expected 1 section, got {len(sections)}")
    return sections[0]


def new_flags_sections(flags: FlagSetLike) -> list[Section]:
    """FLAGS sections for every flag available to flags, one per parent flag set."""
    return _new_flag_sections(flags, shared_alignment=True)


def new_subcommands_section(subcommands: Iterable[Any]) -> Section:
    """A SUBCOMMANDS section listing each subcommand's name and short help."""
    lines = [f"{sc.name}\t{sc.short_help}\n" for sc in subcommands]
    if not lines:
        lines.append("(no subcommands)")
    return Section(
        title="SUBCOMMANDS",
        lines=lines,
        line_prefix=DEFAULT_LINE_PREFIX,
        line_columns=True,
    )
"""Formatting of individual flags for help text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol


class FlagLike(Protocol):
    """What help formatting needs to know about a flag.

    short_name and long_name are None (or empty) when the flag lacks them.
    default is the default value rendered as text, empty when not shown.
    """

    short_name: Optional[str]
    long_name: Optional[str]
    placeholder: str
    usage: str
    default: str
    flag_set: "FlagSetLike"


class FlagSetLike(Protocol):
    """What help formatting needs to know about a flag set."""

    name: str

    def walk_flags(self) -> Iterable[FlagLike]:
        """Yield every flag available to the set, parents' flags included."""


class HelpFlag:
    """Wraps a flag so it can be rendered with format specs.

    Supported specs::

        s     short and long name, comma delimited     "f, foo"
        +s    like s with hyphen prefixes              "-f, --foo"
        #+s   like +s with empty short names padded    "    --foo"
        v     like s with placeholder suffix           "f, foo STR"
        +v    like +s with placeholder suffix          "-f, --foo STR"
        #+v   like #+s with placeholder suffix         "    --foo STR"
        n     short name                               "f"
        +n    short name with one-hyphen prefix        "-f"
        l     long name                                "foo"
        +l    long name with two-hyphen prefix         "--foo"
        u     usage text                               "foo parameter"
        k     placeholder                              "STR"
        d     default value                            "bar"
    """

    def __init__(self, flag: FlagLike | None) -> None:
        self.flag = flag

    def __format__(self, spec: str) -> str:
        verb = spec[-1] if spec else "v"
        modifiers = spec[:-1]
        plus = "+" in modifiers
        sharp = "#" in modifiers
        flag = self.flag

        if flag is None:
            return f"%!{verb}<nil>"

        short = flag.short_name or ""
        long = flag.long_name or ""

        if verb in ("s", "v", "x"):
            add_padding = plus and sharp
            short_text = ("-" + short if plus else short) if short else ""
            long_text = ("--" + long if plus else long) if long else ""
            if short and long:
                text = f"{short_text}, {long_text}"
            elif short:
                text = short_text
            elif long and add_padding:
                text = f"    {long_text}"
            else:
                text = long_text
            if verb == "v" and flag.placeholder:
                text += " " + flag.placeholder
            return text
        if verb == "n":
            if not short:
                return ""
            return "-" + short if plus else short
        if verb == "l":
            if not long:
                return ""
            return "--" + long if plus else long
        if verb == "d":
            return flag.default
        if verb == "u":
            return flag.usage
        if verb == "k":
            return flag.placeholder
        return ""

    def __str__(self) -> str:
        return format(self, "v")


def format_flag(flag: FlagLike | None, spec: str) -> str:
    """Format a flag with one of the specs supported by HelpFlag."""
    return format(HelpFlag(flag), spec)


@dataclass
class FlagSpec:
    """A single help line for a flag: a names-and-placeholder spec and a usage."""

    flag: FlagLike
    spec: str
    usage: str

    def __str__(self) -> str:
        """Tab-delimited, newline-terminated text for columnar layout."""
        return f"{self.spec}\t{self.usage}\n"


def make_flag_spec(flag: FlagLike) -> FlagSpec:
    """Build the FlagSpec of a flag."""
    spec = format(HelpFlag(flag), "#+v")
    is_std = getattr(flag, "is_std_flag", None)
    if callable(is_std) and is_std():
        spec = spec.replace("--", "-", 1).strip()

    usage = flag.usage
    if flag.default:
        usage = f"{usage} (default: {flag.default})"

    return FlagSpec(flag=flag, spec=spec, usage=usage)
from __future__ import annotations

import io
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Optional

import pytest

from ffconf.section import (
    Section,
    new_flags_section,
    new_flags_sections,
    new_section,
    new_subcommands_section,
    new_untitled_section,
)


@dataclass(eq=False)
class FakeFlag:
    short_name: Optional[str] = None
    long_name: Optional[str] = None
    placeholder: str = ""
    usage: str = ""
    default: str = ""
    flag_set: object = None
    std: bool = False

    def is_std_flag(self):
        return self.std


class FakeFlagSet:
    def __init__(self, name, parent=None):
        self.name = name
        self.parent = parent
        self._flags = []

    def add(self, **kwargs):
        flag = FakeFlag(flag_set=self, **kwargs)
        self._flags.append(flag)
        return flag

    def walk_flags(self):
        yield from self._flags
        if self.parent is not None:
            yield from self.parent.walk_flags()


def core_flags():
    fs = FakeFlagSet("fftest")
    fs.add(short_name="s", long_name="str", placeholder="STRING", usage="string")
    fs.add(short_name="i", long_name="int", placeholder="INT", usage="int", default="0")
    fs.add(short_name="f", long_name="flt", placeholder="FLOAT64", usage="float64", default="0")
    fs.add(short_name="a", long_name="aflag", placeholder="BOOL", usage="bool a", default="true")
    fs.add(short_name="b", long_name="bflag", usage="bool b")
    fs.add(short_name="c", long_name="cflag", usage="bool c")
    fs.add(short_name="d", long_name="dur", placeholder="DURATION", usage="time.Duration", default="0s")
    fs.add(short_name="x", long_name="xxx", placeholder="STR", usage="collection of strings (repeatable)")
    return fs


def command_flags():
    root = FakeFlagSet("root")
    root.add(short_name="v", long_name="verbose", usage="verbose logging")
    root.add(long_name="config-file", placeholder="STRING", usage="config file")
    foo = FakeFlagSet("foo", parent=root)
    foo.add(short_name="a", long_name="alpha", placeholder="INT", usage="alpha integer", default="10")
    foo.add(short_name="b", long_name="beta", usage="beta boolean")
    return foo


def test_flags_section_default():
    want = """FLAGS
  -s, --str STRING     string
  -i, --int INT        int (default: 0)
  -f, --flt FLOAT64    float64 (default: 0)
  -a, --aflag BOOL     bool a (default: true)
  -b, --bflag          bool b
  -c, --cflag          bool c
  -d, --dur DURATION   time.Duration (default: 0s)
  -x, --xxx STR        collection of strings (repeatable)"""
    assert str(new_flags_section(core_flags())).strip() == want


def test_flags_sections_std_flags():
    fs = FakeFlagSet("fftest")
    fs.add(long_name="a", placeholder="BOOL", usage="bool a", default="true", std=True)
    fs.add(long_name="b", usage="bool b", std=True)
    fs.add(long_name="c", usage="bool c", std=True)
    fs.add(long_name="d", placeholder="DURATION", usage="time.Duration", default="0s", std=True)
    fs.add(long_name="f", placeholder="FLOAT64", usage="float64", default="0", std=True)
    fs.add(long_name="i", placeholder="INT", usage="int", default="0", std=True)
    fs.add(long_name="s", placeholder="STRING", usage="string", std=True)
    fs.add(long_name="x", placeholder="STRING", usage="collection of strings (repeatable)", std=True)
    want = """FLAGS
  -a BOOL       bool a (default: true)
  -b            bool b
  -c            bool c
  -d DURATION   time.Duration (default: 0s)
  -f FLOAT64    float64 (default: 0)
  -i INT        int (default: 0)
  -s STRING     string
  -x STRING     collection of strings (repeatable)"""
    sections = new_flags_sections(fs)
    assert len(sections) == 1
    assert str(sections[0]).strip() == want


def test_flags_sections_grouped_by_parent():
    sections = new_flags_sections(command_flags())
    assert [s.title for s in sections] == ["FLAGS (foo)", "FLAGS (root)"]
    assert sections[0].lines == [
        "-a, --alpha INT            alpha integer (default: 10)",
        "-b, --beta                 beta boolean",
    ]
    assert sections[1].lines == [
        "-v, --verbose              verbose logging",
        "    --config-file STRING   config file",
    ]


def test_flags_section_single_includes_parents():
    want = """FLAGS
  -a, --alpha INT            alpha integer (default: 10)
  -b, --beta                 beta boolean
  -v, --verbose              verbose logging
      --config-file STRING   config file
"""
    assert str(new_flags_section(command_flags())) == want


def test_flags_sections_only_long_trimmed():
    fs = FakeFlagSet("fftest")
    fs.add(long_name="alpha", usage="alpha usage")
    fs.add(long_name="beta", usage="beta usage")
    assert new_flags_sections(fs)[0].lines == ["--alpha   alpha usage", "--beta    beta usage"]


def test_flags_section_requires_flags():
    with pytest.raises(ValueError):
        new_flags_section(FakeFlagSet("empty"))


def test_subcommands_section():
    subs = [
        SimpleNamespace(name="create", short_help="create or overwrite an object"),
        SimpleNamespace(name="delete", short_help="delete an object"),
        SimpleNamespace(name="list", short_help="list available objects"),
    ]
    want = """SUBCOMMANDS
  create   create or overwrite an object
  delete   delete an object
  list     list available objects
"""
    assert str(new_subcommands_section(subs)) == want


def test_subcommands_section_empty():
    section = new_subcommands_section([])
    assert section.lines == ["(no subcommands)"]
    assert str(section) == "SUBCOMMANDS\n  (no subcommands)\n"


def test_new_section_and_write_to():
    section = new_section("NAME", "fftest")
    stream = io.StringIO()
    count = section.write_to(stream)
    assert stream.getvalue() == "NAME\n  fftest\n"
    assert count == len("NAME\n  fftest\n")


def test_untitled_section():
    section = new_untitled_section("one\n", "two")
    assert section.title == ""
    assert str(section) == "one\ntwo\n"


def test_section_columns():
    section = Section(title="T", lines=["a\tb", "ccc\td"], line_prefix="", line_columns=True)
    assert str(section) == "T\na     b\nccc   d\n"
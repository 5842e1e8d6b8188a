# ffconf

Building blocks for the flags of command-line programs: typed flag values
that parse strings the way a strict flag parser does, and tools that
render help text for flags and commands in aligned columns.

## Installation

```
pip install ffconf
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "ffconf[test]"
pytest
```

## Flag values

`ffconf.value` holds values that are set from strings. Every value parses
a string with `set`, reports its current value with `get`, tells with
`is_set` whether it was set explicitly, and goes back to its default with
`reset`. `str()` renders the value as it appears in help text.

```python
from ffconf.value import Int, Duration, Bool

port = Int()
port.set("8080")
port.get()        # 8080
port.is_set()     # True
port.reset()
port.get()        # 0

timeout = Duration()
timeout.set("1m30s")
timeout.get()     # 90000000000 (nanoseconds)
str(timeout)      # "1m30s"

Bool().is_bool_flag()  # True
```

Typed values are `Bool`, `Int`, `Int8`, `Int16`, `Int32`, `Int64`,
`Uint`, `Uint8`, `Uint16`, `Uint32`, `Uint64`, `Float32`, `Float64`,
`String`, `Complex64`, `Complex128` and `Duration`.

- `Int` accepts base-10 digits only; the sized signed types and all
  unsigned types also accept `0b`, `0o`, `0x` and leading-zero octal
  prefixes.
- Input out of range for the type's width is rejected; `Float32` rejects
  values that overflow 32 bits.
- Booleans accept `1`, `t`, `T`, `true`, `TRUE`, `True` and their false
  counterparts.
- Durations take units `ns`, `us`/`µs`, `ms`, `s`, `m` and `h`, e.g.
  `5h6m` or `1.5s`.

A failed `set` raises `ValueError` whose message starts with
`parse error:`.

Any parser can be supplied directly, with an optional default:

```python
from ffconf.value import Value

site = Value(parse_func=lambda s: s, default="example.com")
site.set("example.org")
site.reset()
site.get()        # "example.com"
```

`new_value_reflect(target, attribute, default)` binds a value to an
attribute of an object. The type is taken from the attribute's current
value (`bool`, `int`, `float`, `str` or `complex`); a non-empty default
string is parsed and assigned right away.

The parsers and formatters themselves live in `ffconf.types`:
`ValueType` (with `parse`, `zero` and `format`), `parse_bool`,
`parse_int`, `parse_int_bits`, `parse_uint_bits`, `parse_float_bits`,
`parse_complex_bits`, `parse_duration`, `format_duration` and
`format_value`.

## Help text

The help tools work with any objects that have the attributes below
(see the `FlagLike` and `FlagSetLike` protocols in `ffconf.flagformat`):

- a flag has `short_name`, `long_name` (either may be `None` or empty),
  `placeholder`, `usage`, `default` (already rendered as text, empty to
  hide it) and `flag_set`;
- a flag set has `name` and `walk_flags()`, which yields every flag
  available to it, including those of parent sets.

```python
from dataclasses import dataclass, field
from ffconf.help import flags_help

@dataclass
class FlagSet:
    name: str
    flags: list = field(default_factory=list)

    def walk_flags(self):
        return iter(self.flags)

@dataclass
class Flag:
    short_name: str | None
    long_name: str | None
    placeholder: str
    usage: str
    default: str
    flag_set: FlagSet

fs = FlagSet("fftest")
fs.flags.append(Flag("d", "dur", "DURATION", "duration flag", "0s", fs))
fs.flags.append(Flag("s", "str", "STRING", "string flag", "", fs))
print(flags_help(fs))
```

prints

```
NAME
  fftest

FLAGS
  -d, --dur DURATION   duration flag (default: 0s)
  -s, --str STRING     string flag
```

- `flags_help(flags, *usage)` builds a NAME section, a USAGE section when
  usage lines are given, and FLAGS sections.
- `command_help(command)` builds COMMAND, USAGE, an untitled long-help
  section, SUBCOMMANDS and FLAGS sections. The command needs `name`,
  `usage`, `short_help`, `long_help`, `flags`, `subcommands` and
  `get_selected()`; when a subcommand has been selected, its help is shown
  instead.
- When flags come from more than one flag set, each set gets its own
  `FLAGS (name)` section, with columns aligned across all of them.

Both return a `Help`, a list of `Section`s joined by blank lines, with
`write_to(stream)` and `str()`. Sections can also be built directly with
`ffconf.section.new_section`, `new_untitled_section`, `new_flags_section`,
`new_flags_sections` and `new_subcommands_section`.

`ffconf.flagformat.format_flag(flag, spec)` renders one flag. For example,
`+s` gives `-f, --foo`, `#+v` gives `    --foo STR` for a flag without a
short name, and `d` gives the default. `make_flag_spec(flag)` gives the
two-column help line of a flag.

## Rewrapping prose

`ffconf.rewrap.rewrap_at(text, width)` reflows text to a width: single
newlines become spaces, blank lines separate paragraphs, and tabs around
each line are dropped. `rewrap(text)` uses the terminal width from
`columns()`, kept at no less than 40 and damped above 180. `columns()`
asks `stty size` once and falls back to `DEFAULT_COLUMNS` (120).

## Comparing multi-line text

`ffconf.textdiff.unindent_string` strips the indentation of multi-line
strings written inline in code, and `diff_string` shows a line-by-line
diff of two strings, which helps when asserting on rendered help.

## What this package does not do

It has no flag set or command-line parser of its own, no command tree
that parses arguments and runs commands, and no readers for config files
or environment variables. Help rendering expects those objects to be
supplied by the caller in the shapes described above. There are no list,
set or enum value types either; each value holds a single value.
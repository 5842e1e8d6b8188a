"""Supported primitive value types with their parsers and formatters."""

from __future__ import annotations

import enum
import math
import re
import struct
from decimal import Decimal
from fractions import Fraction
from typing import Any

_INT_DIGITS = {2: "01", 8: "01234567", 10: "0123456789", 16: "0123456789abcdefABCDEF"}


def parse_bool(s: str) -> bool:
    """Parse a boolean the way the standard flag parser does."""
    if s in ("1", "t", "T", "TRUE", "true", "True"):
        return True
    if s in ("0", "f", "F", "FALSE", "false", "False"):
        return False
    raise ValueError(f"invalid boolean syntax: {s!r}")


def _check_signed(value: int, bits: int, s: str) -> int:
    if not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
        raise ValueError(f"value out of range: {s!r}")
    return value


def parse_int(s: str) -> int:
    """Parse a base-10 signed 64-bit integer."""
    if not re.fullmatch(r"[+-]?[0-9]+", s):
        raise ValueError(f"invalid syntax: {s!r}")
    return _check_signed(int(s, 10), 64, s)


def _parse_base0(body: str, s: str) -> int:
    prefix = body[:2].lower()
    if prefix in ("0x", "0b", "0o"):
        base, digits, prefixed = {"0x": 16, "0b": 2, "0o": 8}[prefix], body[2:], True
    elif len(body) > 1 and body[0] == "0":
        base, digits, prefixed = 8, body[1:], True
    else:
        base, digits, prefixed = 10, body, False
    if "_" in digits:
        if digits.endswith("_") or "__" in digits or (digits.startswith("_") and not prefixed):
            raise ValueError(f"invalid syntax: {s!r}")
        digits = digits.replace("_", "")
    if not digits or any(c not in _INT_DIGITS[base] for c in digits):
        raise ValueError(f"invalid syntax: {s!r}")
    return int(digits, base)


def parse_int_bits(s: str, bits: int) -> int:
    """Parse a signed integer with base prefixes, limited to the given bit size."""
    negative = False
    body = s
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]
    value = _parse_base0(body, s)
    return _check_signed(-value if negative else value, bits, s)


def parse_uint_bits(s: str, bits: int) -> int:
    """Parse an unsigned integer with base prefixes, limited to the given bit size."""
    value = _parse_base0(s, s)
    if value >= 1 << bits:
        raise ValueError(f"value out of range: {s!r}")
    return value


_DEC_FLOAT = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_SPECIAL_FLOAT = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)


def _to_float32(value: float, s: str) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        raise ValueError(f"value out of range: {s!r}") from None


def parse_float_bits(s: str, bits: int) -> float:
    """Parse a float of 32 or 64 bits, rejecting values out of range."""
    if _SPECIAL_FLOAT.fullmatch(s):
        return float(s)
    try:
        if _DEC_FLOAT.fullmatch(s):
            value = float(s)
        elif _HEX_FLOAT.fullmatch(s):
            value = float.fromhex(s)
        else:
            raise ValueError(f"invalid syntax: {s!r}")
    except OverflowError:
        raise ValueError(f"value out of range: {s!r}") from None
    if math.isinf(value):
        raise ValueError(f"value out of range: {s!r}")
    return _to_float32(value, s) if bits == 32 else value


def parse_complex_bits(s: str, bits: int) -> complex:
    """Parse a complex number of 64 or 128 bits, e.g. "1+2i" or "(3i)"."""
    part_bits = 32 if bits == 64 else 64
    body = s
    if len(body) >= 2 and body[0] == "(" and body[-1] == ")":
        body = body[1:-1]
    if not body.endswith("i"):
        return complex(parse_float_bits(body, part_bits), 0.0)
    body = body[:-1]
    split = 0
    for k in range(len(body) - 1, 0, -1):
        if body[k] in "+-" and body[k - 1] not in "eEpP":
            split = k
            break
    real_text, imag_text = body[:split], body[split:]
    if imag_text in ("+", "-"):
        imag_text += "1"
    real = parse_float_bits(real_text, part_bits) if real_text else 0.0
    return complex(real, parse_float_bits(imag_text, part_bits))


_DURATION_UNITS = {
    "ns": 1,
    "us": 1000,
    "µs": 1000,
    "μs": 1000,
    "ms": 10**6,
    "s": 10**9,
    "m": 60 * 10**9,
    "h": 3600 * 10**9,
}
_DURATION_PART = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def parse_duration(s: str) -> int:
    """Parse a duration such as "1h30m" or "250ms" into nanoseconds."""
    body = s
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]
    if body == "0":
        return 0
    if not body:
        raise ValueError(f"invalid duration {s!r}")
    total = Fraction(0)
    pos = 0
    while pos < len(body):
        m = _DURATION_PART.match(body, pos)
        whole, frac, unit = m.group(1), m.group(2), m.group(3)
        if not whole and not frac:
            raise ValueError(f"invalid duration {s!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {s!r}")
        if unit not in _DURATION_UNITS:
            raise ValueError(f"unknown unit {unit!r} in duration {s!r}")
        amount = Fraction(int(whole or "0"))
        if frac:
            amount += Fraction(int(frac), 10 ** len(frac))
        total += amount * _DURATION_UNITS[unit]
        pos = m.end()
    nanos = int(total)
    if nanos > (1 << 63) - (0 if negative else 1):
        raise ValueError(f"invalid duration {s!r}")
    return -nanos if negative else nanos


def _frac_text(value: int, precision: int) -> str:
    whole, rest = divmod(value, 10**precision)
    fraction = str(rest).rjust(precision, "0").rstrip("0")
    return f"{whole}.{fraction}" if fraction else str(whole)


def format_duration(nanos: int) -> str:
    """Render nanoseconds as a duration string such as "1h0m0s"."""
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    u = abs(nanos)
    if u < 1000:
        return f"{sign}{u}ns"
    if u < 10**6:
        return f"{sign}{_frac_text(u, 3)}µs"
    if u < 10**9:
        return f"{sign}{_frac_text(u, 6)}ms"
    hours, rest = divmod(u, 3600 * 10**9)
    minutes, rest = divmod(rest, 60 * 10**9)
    text = ""
    if hours:
        text += f"{hours}h"
    if hours or minutes:
        text += f"{minutes}m"
    return f"{sign}{text}{_frac_text(rest, 9)}s"


def _shortest_text_to_go(text: str) -> str:
    sign, digits, exp = Decimal(text).as_tuple()
    prefix = "-" if sign else ""
    ds = "".join(map(str, digits)).lstrip("0")
    if not ds:
        return prefix + "0"
    x = len(ds) + exp - 1
    ds = ds.rstrip("0")
    if x < -4 or x >= 21:
        mantissa = ds[0] + ("." + ds[1:] if len(ds) > 1 else "")
        return f"{prefix}{mantissa}e{'+' if x >= 0 else '-'}{abs(x):02d}"
    if x < 0:
        return f"{prefix}0.{'0' * (-x - 1)}{ds}"
    whole = ds[: x + 1].ljust(x + 1, "0")
    fraction = ds[x + 1 :]
    return f"{prefix}{whole}.{fraction}" if fraction else prefix + whole


def _format_float(value: float, bits: int = 64) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = repr(value)
    if bits == 32:
        for precision in range(1, 10):
            candidate = f"{value:.{precision}g}"
            if struct.unpack("f", struct.pack("f", float(candidate)))[0] == value:
                text = candidate
                break
    return _shortest_text_to_go(text)


def _format_complex(value: complex, bits: int = 64) -> str:
    imag = _format_float(value.imag, bits)
    if imag[0] not in "+-":
        imag = "+" + imag
    return f"({_format_float(value.real, bits)}{imag}i)"


def format_value(value: Any) -> str:
    """Render a value as flag text: lowercase booleans, shortest floats."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, complex):
        return _format_complex(value)
    return str(value)


class ValueType(enum.Enum):
    """A primitive type that has a default parser and formatter."""

    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    DURATION = "duration"

    def parse(self, s: str) -> Any:
        """Parse s into a value of this type, raising ValueError on failure."""
        name = self.value
        if self is ValueType.BOOL:
            return parse_bool(s)
        if self is ValueType.INT:
            return parse_int(s)
        if self is ValueType.STRING:
            return s
        if self is ValueType.DURATION:
            return parse_duration(s)
        if self is ValueType.UINT:
            return parse_uint_bits(s, 64)
        if name.startswith("int"):
            return parse_int_bits(s, int(name[3:]))
        if name.startswith("uint"):
            return parse_uint_bits(s, int(name[4:]))
        if name.startswith("float"):
            return parse_float_bits(s, int(name[5:]))
        return parse_complex_bits(s, int(name[7:]))

    def zero(self) -> Any:
        """Return the zero value of this type."""
        if self is ValueType.BOOL:
            return False
        if self is ValueType.STRING:
            return ""
        if self in (ValueType.FLOAT32, ValueType.FLOAT64):
            return 0.0
        if self in (ValueType.COMPLEX64, ValueType.COMPLEX128):
            return 0j
        return 0

    def format(self, value: Any) -> str:
        """Render a value of this type as text."""
        if self is ValueType.DURATION:
            return format_duration(value)
        if self is ValueType.FLOAT32:
            return _format_float(value, 32)
        if self is ValueType.COMPLEX64:
            return _format_complex(value, 32)
        return format_value(value)
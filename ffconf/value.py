"""Flag values that hold a single parsed value."""

from __future__ import annotations

from typing import Any, Callable

from .types import ValueType, format_value


class Value:
    """A flag value that is set by parsing a string."""

    value_type: ValueType | None = None

    def __init__(
        self,
        parse_func: Callable[[str], Any] | None = None,
        default: Any = None,
        value_type: ValueType | None = None,
    ) -> None:
        if value_type is not None:
            self.value_type = value_type
        if parse_func is None:
            if self.value_type is None:
                raise TypeError("unsupported value type: a parse function is required")
            parse_func = self.value_type.parse
        if default is None and self.value_type is not None:
            default = self.value_type.zero()
        self.parse_func = parse_func
        self.default = default
        self._value = default
        self._is_set = False

    def set(self, s: str) -> None:
        """Parse s and store the result."""
        try:
            value = self.parse_func(s)
        except ValueError as err:
            raise ValueError(f"parse error: {err}") from err
        self._value = value
        self._is_set = True

    def get(self) -> Any:
        """Return the current value."""
        return self._value

    def reset(self) -> None:
        """Restore the default value."""
        self._value = self.default
        self._is_set = False

    def __str__(self) -> str:
        if self.value_type is not None:
            return self.value_type.format(self._value)
        return format_value(self._value)

    def is_set(self) -> bool:
        """Whether the value has been explicitly set."""
        return self._is_set

    def is_bool_flag(self) -> bool:
        """Whether the value holds a boolean."""
        return self.value_type is ValueType.BOOL or isinstance(self.default, bool)


class Bool(Value):
    value_type = ValueType.BOOL


class Int(Value):
    value_type = ValueType.INT


class Int8(Value):
    value_type = ValueType.INT8


class Int16(Value):
    value_type = ValueType.INT16


class Int32(Value):
    value_type = ValueType.INT32


class Int64(Value):
    value_type = ValueType.INT64


class Uint(Value):
    value_type = ValueType.UINT


class Uint8(Value):
    value_type = ValueType.UINT8


class Uint16(Value):
    value_type = ValueType.UINT16


class Uint32(Value):
    value_type = ValueType.UINT32


class Uint64(Value):
    value_type = ValueType.UINT64


class Float32(Value):
    value_type = ValueType.FLOAT32


class Float64(Value):
    value_type = ValueType.FLOAT64


class String(Value):
    value_type = ValueType.STRING


class Complex64(Value):
    value_type = ValueType.COMPLEX64


class Complex128(Value):
    value_type = ValueType.COMPLEX128


class Duration(Value):
    value_type = ValueType.DURATION


_PY_TYPES = {
    bool: ValueType.BOOL,
    int: ValueType.INT,
    float: ValueType.FLOAT64,
    str: ValueType.STRING,
    complex: ValueType.COMPLEX128,
}


class ReflectValue:
    """A flag value that writes straight into an attribute of an object."""

    def __init__(self, target: Any, attribute: str, value_type: ValueType) -> None:
        self._target = target
        self._attribute = attribute
        self._type = value_type

    def set(self, s: str) -> None:
        """Parse s and assign it to the attribute."""
        setattr(self._target, self._attribute, self._type.parse(s))

    def __str__(self) -> str:
        return self._type.format(getattr(self._target, self._attribute))

    def is_bool_flag(self) -> bool:
        """Whether the attribute holds a boolean."""
        return self._type is ValueType.BOOL

    def placeholder(self) -> str:
        """The upper-case type name, used in help text."""
        return self._type.value.upper()


def new_value_reflect(target: Any, attribute: str, default: str = "") -> ReflectValue:
    """Make a value bound to target.attribute, typed by its current value.

    A non-empty default string is parsed and assigned immediately.
    """
    current = getattr(target, attribute)
    value_type = _PY_TYPES.get(type(current))
    if value_type is None:
        raise TypeError(f"unsupported type {type(current).__name__}")
    value = ReflectValue(target, attribute, value_type)
    if default:
        value.set(default)
    return value
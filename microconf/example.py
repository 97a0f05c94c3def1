"""Demonstration schema used by the `microconf example` command.

A config object with one field of every value type plus a nested vector,
pre-populated with defaults that a config file may override.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models.datatypes import AttrSlot, Binding, ValueType


@dataclass(slots=True)
class Vec2:
    x: int = 1
    y: int = 1


@dataclass(slots=True)
class ExampleConfig:
    """Defaults for the demonstration schema."""

    an_integer: int = 10
    a_float: float = 11.0
    a_double: float = 123.123
    a_bool: bool = True
    a_char: str = "F"
    a_str: str = "test"
    vec: Vec2 = field(default_factory=Vec2)


def example_bindings(config: ExampleConfig) -> list[Binding]:
    """Bind every field of `config` under its own name (`vec.x` for nested)."""

    return [
        Binding(ValueType.INT, AttrSlot(config, "an_integer"), "an_integer"),
        Binding(ValueType.FLOAT, AttrSlot(config, "a_float"), "a_float"),
        Binding(ValueType.DOUBLE, AttrSlot(config, "a_double"), "a_double"),
        Binding(ValueType.BOOL, AttrSlot(config, "a_bool"), "a_bool"),
        Binding(ValueType.CHAR, AttrSlot(config, "a_char"), "a_char"),
        Binding(ValueType.STRING, AttrSlot(config, "a_str"), "a_str"),
        Binding(ValueType.INT, AttrSlot(config, "vec.x"), "vec.x"),
        Binding(ValueType.INT, AttrSlot(config, "vec.y"), "vec.y"),
    ]

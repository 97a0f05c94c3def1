"""Core datatypes shared across microconf modules.

Responsibilities:
- Describe the closed set of value types a binding may declare.
- Provide typed destination slots that the parser writes converted values into.
- Represent bindings, scanned candidate lines and parse outcomes.

Key types:
- `ValueType`, `Slot`, `AttrSlot`, `ItemSlot`, `Binding`, `CandidateLine`
  and `ParseResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, MutableMapping, Protocol

from ..errors import ErrorKind, MicroConfError


class ValueType(Enum):
    """Conversion rule declared by a binding."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "char"
    STRING = "string"


class Destination(Protocol):
    """Writable reference to caller-owned storage."""

    def set(self, value: Any) -> None: ...

    def get(self) -> Any: ...


@dataclass(slots=True)
class Slot:
    """Standalone box holding one value.

    Store the default in `value` before parsing; a matching line replaces it.

    Attributes:
        value: Current value of the slot.
    """

    value: Any = None

    def set(self, value: Any) -> None:
        self.value = value

    def get(self) -> Any:
        return self.value


@dataclass(slots=True)
class AttrSlot:
    """Destination that writes an attribute of a caller object.

    Attributes:
        target: Object owning the attribute.
        path: Attribute name, dotted to reach nested objects (`"vec.x"`).
    """

    target: object
    path: str

    def _owner(self) -> tuple[object, str]:
        owner = self.target
        *parents, name = self.path.split(".")
        for parent in parents:
            owner = getattr(owner, parent)
        return owner, name

    def set(self, value: Any) -> None:
        owner, name = self._owner()
        setattr(owner, name, value)

    def get(self) -> Any:
        owner, name = self._owner()
        return getattr(owner, name)


@dataclass(slots=True)
class ItemSlot:
    """Destination that writes one key of a mutable mapping."""

    mapping: MutableMapping[str, Any]
    key: str

    def set(self, value: Any) -> None:
        self.mapping[self.key] = value

    def get(self) -> Any:
        return self.mapping.get(self.key)


@dataclass(frozen=True, slots=True)
class Binding:
    """Association between a config key, its value type and a destination.

    Attributes:
        type: Conversion rule for values of this key.
        destination: Slot receiving the converted value.
        key: Literal, case-sensitive key name matched at the start of a line.
    """

    type: ValueType
    destination: Destination
    key: str


@dataclass(frozen=True, slots=True)
class CandidateLine:
    """One physical line after comment stripping and left trimming.

    Attributes:
        text: Line text without the comment and leading whitespace.
        line_number: 1-based physical line number in the source stream.
    """

    text: str
    line_number: int


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of one parse call.

    Attributes:
        error: Result kind; `ErrorKind.OK` on success.
        detail: Human-readable description, empty on success.
        line_number: Physical line that caused the failure, if any.
        key: Binding key involved in the failure, if any.
        hint: Optional remediation text for failures.
        applied: Number of destination writes performed before returning.
    """

    error: ErrorKind = ErrorKind.OK
    detail: str = ""
    line_number: int | None = None
    key: str | None = None
    hint: str | None = None
    applied: int = 0

    @property
    def ok(self) -> bool:
        return self.error is ErrorKind.OK

    @property
    def code(self) -> int:
        """Integer result code (0 for success, negative for failures)."""

        return int(self.error)

    @classmethod
    def from_error(cls, error: MicroConfError, applied: int = 0) -> ParseResult:
        """Build a failed result from a raised parse error."""

        return cls(
            error=error.kind,
            detail=error.detail,
            line_number=error.line_number,
            key=error.key,
            hint=error.hint,
            applied=applied,
        )

    def raise_for_error(self) -> None:
        """Raise `MicroConfError` when this result is a failure."""

        if self.ok:
            return
        raise MicroConfError(
            kind=self.error,
            detail=self.detail,
            hint=self.hint,
            line_number=self.line_number,
            key=self.key,
        )

"""
Runtime values produced by the evaluator.

The set of variants is closed: Integer, Boolean, Null, Error and the
ReturnValue wrapper that carries a ``return`` up to the program boundary.
Booleans and Null are singletons (TRUE, FALSE, NULL) so equality between
them can be decided by identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ObjectType(StrEnum):
    """Kinds of runtime value, as named in error messages."""

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    ERROR = "ERROR"
    RETURN_VALUE = "RETURN_VALUE"


@dataclass(frozen=True)
class Integer:
    value: int

    @property
    def type(self) -> ObjectType:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    @property
    def type(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Null:
    @property
    def type(self) -> ObjectType:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"


@dataclass(frozen=True)
class Error:
    """A runtime failure, passed along like any other value."""

    message: str

    @property
    def type(self) -> ObjectType:
        return ObjectType.ERROR

    def inspect(self) -> str:
        return f"ERROR: {self.message}"


@dataclass(frozen=True)
class ReturnValue:
    """Wraps the value of a ``return`` until it reaches the program boundary."""

    value: Object

    @property
    def type(self) -> ObjectType:
        return ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        return self.value.inspect()


Object = Integer | Boolean | Null | Error | ReturnValue

TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool_to_boolean(value: bool) -> Boolean:
    """Map a Python bool onto the TRUE/FALSE singletons."""
    return TRUE if value else FALSE


def is_error(obj: Object | None) -> bool:
    return obj is not None and obj.type == ObjectType.ERROR

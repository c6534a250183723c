"""Tests for runtime objects and scopes."""

from __future__ import annotations

from monkey.core.environment import Environment
from monkey.core.object import (
    FALSE,
    NULL,
    TRUE,
    Error,
    Integer,
    ObjectType,
    ReturnValue,
    is_error,
    native_bool_to_boolean,
)


class TestObjects:
    def test_inspect(self) -> None:
        assert Integer(-3).inspect() == "-3"
        assert TRUE.inspect() == "true"
        assert FALSE.inspect() == "false"
        assert NULL.inspect() == "null"
        assert Error("boom").inspect() == "ERROR: boom"
        assert ReturnValue(Integer(7)).inspect() == "7"

    def test_types(self) -> None:
        assert Integer(1).type == ObjectType.INTEGER
        assert TRUE.type == ObjectType.BOOLEAN
        assert NULL.type == ObjectType.NULL
        assert Error("x").type == ObjectType.ERROR
        assert ReturnValue(NULL).type == ObjectType.RETURN_VALUE

    def test_native_bool(self) -> None:
        assert native_bool_to_boolean(True) is TRUE
        assert native_bool_to_boolean(False) is FALSE

    def test_is_error(self) -> None:
        assert is_error(Error("x"))
        assert not is_error(Integer(0))
        assert not is_error(None)


class TestEnvironment:
    def test_get_missing(self) -> None:
        assert Environment().get("nope") is None

    def test_set_and_get(self) -> None:
        env = Environment()
        value = env.set("a", Integer(1))
        assert value == Integer(1)
        assert env.get("a") == Integer(1)
        assert "a" in env

    def test_inner_scope_falls_back_to_outer(self) -> None:
        outer = Environment()
        outer.set("a", Integer(1))
        inner = Environment.enclosed(outer)
        assert inner.get("a") == Integer(1)

    def test_inner_binding_shadows_outer(self) -> None:
        outer = Environment()
        outer.set("a", Integer(1))
        inner = Environment.enclosed(outer)
        inner.set("a", Integer(2))
        assert inner.get("a") == Integer(2)
        assert outer.get("a") == Integer(1)

"""
Tree-walking evaluator for the monkey language.

Walks a parsed Program and produces runtime Objects. Failures inside the
program (unknown operators, type mismatches, unbound names, division by
zero) come back as Error objects and travel up through statement
evaluation like ordinary values. Nothing in a monkey program can make the
evaluator raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from monkey.core.ast import (
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    Node,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.core.environment import Environment
from monkey.core.errors import EvaluationError
from monkey.core.object import (
    FALSE,
    NULL,
    TRUE,
    Error,
    Integer,
    Object,
    ObjectType,
    ReturnValue,
    is_error,
    native_bool_to_boolean,
)
from monkey.core.parser import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)


def evaluate(node: Node, env: Environment | None = None) -> Object:
    """Evaluate an AST node.

    Args:
        node: Any node of a parsed program, usually the Program itself.
        env: Scope for ``let`` bindings and identifier lookups. A fresh
            top-level scope is used when omitted.

    Returns:
        The resulting Object. Runtime failures are returned as Error.

    Raises:
        EvaluationError: If ``node`` is not an AST node.
    """
    if env is None:
        env = Environment()
    return _interpret(node, env)


def _interpret(node: Node, env: Environment) -> Object:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(node, Program):
        return _interpret_program(node.statements, env)

    if isinstance(node, ExpressionStatement):
        if node.expression is None:
            return NULL
        return _interpret(node.expression, env)

    if isinstance(node, LetStatement):
        return _interpret_let(node, env)

    if isinstance(node, ReturnStatement):
        value = _interpret(node.return_value, env)
        if is_error(value):
            return value
        return ReturnValue(value)

    if isinstance(node, IntegerLiteral):
        return Integer(node.value)

    if isinstance(node, Identifier):
        return _interpret_identifier(node, env)

    if isinstance(node, PrefixExpression):
        right = _interpret(node.right, env)
        if is_error(right):
            return right
        return _interpret_prefix(node.operator, right)

    if isinstance(node, InfixExpression):
        left = _interpret(node.left, env)
        if is_error(left):
            return left
        right = _interpret(node.right, env)
        if is_error(right):
            return right
        return _interpret_infix(node.operator, left, right)

    raise EvaluationError(f"Unknown node type: {type(node).__name__}")


def _interpret_program(statements: Iterable[Statement], env: Environment) -> Object:
    """Run statements in order; a return or an error stops the sequence."""
    result: Object = NULL
    for stmt in statements:
        result = _interpret(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
        if isinstance(result, Error):
            logger.debug("Evaluation stopped at %r: %s", stmt.token_literal(), result.message)
            return result
    return result


def _interpret_let(node: LetStatement, env: Environment) -> Object:
    value = _interpret(node.value, env)
    if is_error(value):
        return value
    env.set(node.name.value, value)
    return NULL


def _interpret_identifier(node: Identifier, env: Environment) -> Object:
    value = env.get(node.value)
    if value is None:
        return Error(f"identifier not found: {node.value}")
    return value


def _interpret_prefix(operator: str, right: Object) -> Object:
    if operator == "!":
        return _interpret_bang(right)
    if operator == "-":
        return _interpret_minus_prefix(right)
    return Error(f"unknown operator: {operator}{right.type}")


def _interpret_bang(right: Object) -> Object:
    if right is TRUE:
        return FALSE
    if right is FALSE or right is NULL:
        return TRUE
    return FALSE


def _interpret_minus_prefix(right: Object) -> Object:
    if not isinstance(right, Integer):
        return Error(f"unknown operator: -{right.type}")
    return _checked(-right.value, f"-({right.value})")


def _interpret_infix(operator: str, left: Object, right: Object) -> Object:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return _interpret_integer_infix(operator, left, right)
    if left.type != right.type:
        return Error(f"type mismatch: {left.type} {operator} {right.type}")
    # Booleans and Null are singletons: equality is identity
    if operator == "==":
        return native_bool_to_boolean(left is right)
    if operator == "!=":
        return native_bool_to_boolean(left is not right)
    return Error(f"unknown operator: {left.type} {operator} {right.type}")


def _interpret_integer_infix(operator: str, left: Integer, right: Integer) -> Object:
    lval = left.value
    rval = right.value
    expr_text = f"{lval} {operator} {rval}"

    # Arithmetic
    if operator == "+":
        return _checked(lval + rval, expr_text)
    if operator == "-":
        return _checked(lval - rval, expr_text)
    if operator == "*":
        return _checked(lval * rval, expr_text)
    if operator == "/":
        if rval == 0:
            return Error("division by zero")
        return _checked(_truncating_div(lval, rval), expr_text)

    # Comparison
    if operator == "<":
        return native_bool_to_boolean(lval < rval)
    if operator == ">":
        return native_bool_to_boolean(lval > rval)
    if operator == "==":
        return native_bool_to_boolean(lval == rval)
    if operator == "!=":
        return native_bool_to_boolean(lval != rval)

    return Error(f"unknown operator: {ObjectType.INTEGER} {operator} {ObjectType.INTEGER}")


def _truncating_div(lval: int, rval: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(lval) // abs(rval)
    if (lval < 0) != (rval < 0):
        return -quotient
    return quotient


def _checked(value: int, expr_text: str) -> Object:
    """Wrap ``value`` as an Integer if it fits in 64 bits."""
    if not INT64_MIN <= value <= INT64_MAX:
        return Error(f"integer overflow: {expr_text}")
    return Integer(value)

"""
Abstract syntax tree for the monkey language.

The node set is closed: three statement kinds and four expression kinds
under a single Program root. Every node is a frozen pydantic model that
keeps the token it was built from, answers ``token_literal()`` with that
token's text, and renders through ``str()`` in a canonical form where every
prefix and infix result is parenthesized:

- Program(let x = (1 + (2 * 3));) → "let x = (1 + (2 * 3));"
- PrefixExpression(-, 5) → "(-5)"
- ExpressionStatement(None) → ""
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from monkey.core.tokens import Token

_NODE_CONFIG = ConfigDict(frozen=True, arbitrary_types_allowed=True)


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


class Identifier(BaseModel):
    """A bare name: ``x``, ``myVar``."""

    token: Token
    value: str

    model_config = _NODE_CONFIG

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value


class IntegerLiteral(BaseModel):
    """A signed 64-bit integer literal."""

    token: Token
    value: int

    model_config = _NODE_CONFIG

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal


class PrefixExpression(BaseModel):
    """Unary operation: ``-x`` or ``!x``."""

    token: Token
    operator: str
    right: Expression

    model_config = _NODE_CONFIG

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


class InfixExpression(BaseModel):
    """Binary operation: left op right."""

    token: Token
    left: Expression
    operator: str
    right: Expression

    model_config = _NODE_CONFIG

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


class LetStatement(BaseModel):
    """Binding: ``let name = value;``."""

    token: Token
    name: Identifier
    value: Expression

    model_config = _NODE_CONFIG

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


class ReturnStatement(BaseModel):
    """``return value;``"""

    token: Token
    return_value: Expression

    model_config = _NODE_CONFIG

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"return {self.return_value};"


class ExpressionStatement(BaseModel):
    """
    An expression standing on its own as a statement.

    ``expression`` is None only when the parser gave up on the expression.
    """

    token: Token
    expression: Expression | None = None

    model_config = _NODE_CONFIG

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        if self.expression is None:
            return ""
        return str(self.expression)


class Program(BaseModel):
    """Root node: the ordered statements of a source text."""

    statements: tuple[Statement, ...] = Field(default=())

    model_config = _NODE_CONFIG

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(stmt) for stmt in self.statements)


# ---------------------------------------------------------------------------
# Union types
# ---------------------------------------------------------------------------

Expression = Identifier | IntegerLiteral | PrefixExpression | InfixExpression
Statement = LetStatement | ReturnStatement | ExpressionStatement
Node = Program | Statement | Expression

# Rebuild models for recursive forward references
PrefixExpression.model_rebuild()
InfixExpression.model_rebuild()
LetStatement.model_rebuild()
ReturnStatement.model_rebuild()
ExpressionStatement.model_rebuild()
Program.model_rebuild()

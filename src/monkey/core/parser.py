"""
Parser for the monkey language.

Statements are parsed by recursive descent, dispatching on the leading
token. Expressions are parsed Pratt-style: every token kind that can open an
expression has a prefix rule, every binary operator has an infix rule and a
binding power, and ``parse_expression`` is the one loop that folds them
together.

Binding powers (low to high):
    LOWEST
    EQUALS       == !=
    LESSGREATER  < >
    SUM          + -
    PRODUCT      * /
    PREFIX       -x !x
    CALL

Syntax errors never abort a parse. Each one is appended to ``errors`` and
the parser skips ahead to the next ``;`` before starting the next statement,
so ``parse_program`` always hands back a (possibly partial) Program.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import IntEnum

from monkey.core.ast import (
    Expression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.core.errors import ErrorContext, ParseError
from monkey.core.lexer import Lexer
from monkey.core.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Precedence(IntEnum):
    """Operator binding powers."""

    LOWEST = 1
    EQUALS = 2
    LESSGREATER = 3
    SUM = 4
    PRODUCT = 5
    PREFIX = 6
    CALL = 7


_PRECEDENCES: dict[TokenKind, Precedence] = {
    TokenKind.EQ: Precedence.EQUALS,
    TokenKind.NOT_EQ: Precedence.EQUALS,
    TokenKind.LT: Precedence.LESSGREATER,
    TokenKind.GT: Precedence.LESSGREATER,
    TokenKind.PLUS: Precedence.SUM,
    TokenKind.MINUS: Precedence.SUM,
    TokenKind.SLASH: Precedence.PRODUCT,
    TokenKind.ASTERISK: Precedence.PRODUCT,
}

PrefixParseFn = Callable[[], Expression | None]
InfixParseFn = Callable[[Expression], Expression | None]


class Parser:
    """Builds a Program from the tokens of a Lexer."""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.errors: list[str] = []
        self._error_tokens: list[Token] = []

        self._prefix_parse_fns: dict[TokenKind, PrefixParseFn] = {
            TokenKind.IDENT: self.parse_identifier,
            TokenKind.INT: self.parse_integer_literal,
            TokenKind.BANG: self.parse_prefix_expression,
            TokenKind.MINUS: self.parse_prefix_expression,
            TokenKind.LPAREN: self.parse_grouped_expression,
        }
        self._infix_parse_fns: dict[TokenKind, InfixParseFn] = {
            kind: self.parse_infix_expression for kind in _PRECEDENCES
        }

        # Fill cur_token and peek_token
        self.cur_token = lexer.next_token()
        self.peek_token = lexer.next_token()

    # -- Token cursor --

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, kind: TokenKind) -> bool:
        return self.cur_token.kind == kind

    def peek_token_is(self, kind: TokenKind) -> bool:
        return self.peek_token.kind == kind

    def expect_peek(self, kind: TokenKind) -> bool:
        """Advance if the next token is ``kind``; otherwise record an error."""
        if self.peek_token_is(kind):
            self.next_token()
            return True
        self.peek_error(kind)
        return False

    def peek_precedence(self) -> Precedence:
        return _PRECEDENCES.get(self.peek_token.kind, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return _PRECEDENCES.get(self.cur_token.kind, Precedence.LOWEST)

    # -- Diagnostics --

    def peek_error(self, kind: TokenKind) -> None:
        self._error(
            f"expected next token to be {kind}, got {self.peek_token.kind} instead",
            self.peek_token,
        )

    def no_prefix_parse_fn_error(self, kind: TokenKind) -> None:
        self._error(f"no prefix parse function for {kind} found", self.cur_token)

    def _error(self, message: str, tok: Token) -> None:
        logger.debug("Parse error at %d:%d: %s", tok.line, tok.column, message)
        self.errors.append(message)
        self._error_tokens.append(tok)

    def error_context(self, source_name: str = "<input>") -> ErrorContext | None:
        """Location of the first recorded error, if any."""
        if not self._error_tokens:
            return None
        tok = self._error_tokens[0]
        lines = self.lexer.source.splitlines()
        snippet = lines[tok.line - 1] if tok.line <= len(lines) else ""
        return ErrorContext(source_name, tok.line, tok.column, snippet)

    def _synchronize(self) -> None:
        """Skip to the ``;`` (or EOF) that ends the broken statement."""
        while not self.cur_token_is(TokenKind.SEMICOLON) and not self.cur_token_is(
            TokenKind.EOF
        ):
            self.next_token()

    # -- Statements --

    def parse_program(self) -> Program:
        """Parse statements until EOF."""
        statements: list[Statement] = []
        while not self.cur_token_is(TokenKind.EOF):
            error_count = len(self.errors)
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            if len(self.errors) > error_count:
                self._synchronize()
            self.next_token()
        return Program(statements=tuple(statements))

    def parse_statement(self) -> Statement | None:
        if self.cur_token.kind == TokenKind.LET:
            return self.parse_let_statement()
        if self.cur_token.kind == TokenKind.RETURN:
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> LetStatement | None:
        """let IDENT = expression ;"""
        tok = self.cur_token

        if not self.expect_peek(TokenKind.IDENT):
            return None
        name = Identifier(token=self.cur_token, value=self.cur_token.literal)

        if not self.expect_peek(TokenKind.ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None

        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        return LetStatement(token=tok, name=name, value=value)

    def parse_return_statement(self) -> ReturnStatement | None:
        """return expression ;"""
        tok = self.cur_token
        self.next_token()

        return_value = self.parse_expression(Precedence.LOWEST)
        if return_value is None:
            return None

        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        return ReturnStatement(token=tok, return_value=return_value)

    def parse_expression_statement(self) -> ExpressionStatement:
        tok = self.cur_token
        expression = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        return ExpressionStatement(token=tok, expression=expression)

    # -- Expressions --

    def parse_expression(self, precedence: Precedence) -> Expression | None:
        """Parse a prefix expression, then fold in infix operators that bind tighter."""
        prefix = self._prefix_parse_fns.get(self.cur_token.kind)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.kind)
            return None
        left = prefix()

        while (
            left is not None
            and not self.peek_token_is(TokenKind.SEMICOLON)
            and precedence < self.peek_precedence()
        ):
            infix = self._infix_parse_fns.get(self.peek_token.kind)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)

        return left

    def parse_identifier(self) -> Expression:
        return Identifier(token=self.cur_token, value=self.cur_token.literal)

    def parse_integer_literal(self) -> Expression | None:
        tok = self.cur_token
        value = int(tok.literal)
        if not INT64_MIN <= value <= INT64_MAX:
            self._error(f"could not parse {tok.literal} as integer", tok)
            return None
        return IntegerLiteral(token=tok, value=value)

    def parse_prefix_expression(self) -> Expression | None:
        tok = self.cur_token
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        if right is None:
            return None
        return PrefixExpression(token=tok, operator=tok.literal, right=right)

    def parse_infix_expression(self, left: Expression) -> Expression | None:
        tok = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(token=tok, left=left, operator=tok.literal, right=right)

    def parse_grouped_expression(self) -> Expression | None:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None or not self.expect_peek(TokenKind.RPAREN):
            return None
        return expression


def parse(source: str, source_name: str = "<input>") -> Program:
    """Parse a source string, failing on any syntax error.

    Args:
        source: Program text (e.g., "let x = 1 + 2; x * 3")
        source_name: Name used in the error location

    Returns:
        The parsed Program.

    Raises:
        ParseError: If the parser recorded any errors.
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    if parser.errors:
        raise ParseError(parser.errors, parser.error_context(source_name))
    return program

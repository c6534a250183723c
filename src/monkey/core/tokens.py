"""
Token types for the monkey language.

Kind values double as the names used in parser diagnostics, so operator
kinds carry their lexeme ("=", "+") and everything else its upper-case name.
"""

from __future__ import annotations

from enum import StrEnum


class TokenKind(StrEnum):
    """Token types produced by the lexer."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"


class Token:
    """A single token: its kind, the text it matched, and where."""

    __slots__ = ("kind", "literal", "pos", "line", "column")

    def __init__(
        self,
        kind: TokenKind,
        literal: str,
        pos: int = 0,
        line: int = 1,
        column: int = 1,
    ) -> None:
        self.kind = kind
        self.literal = literal
        self.pos = pos
        self.line = line
        self.column = column

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.literal == other.literal

    def __hash__(self) -> int:
        return hash((self.kind, self.literal))

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.literal!r}, pos={self.pos})"


_KEYWORDS: dict[str, TokenKind] = {
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
}


def lookup_ident(word: str) -> TokenKind:
    """Return the keyword kind for ``word``, or IDENT."""
    return _KEYWORDS.get(word, TokenKind.IDENT)

"""
Lexer for the monkey language.

Scans the source once, front to back, handing out one token per
``next_token()`` call. Characters it does not recognize come back as
ILLEGAL tokens; judging them is left to the parser.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from monkey.core.tokens import Token, TokenKind, lookup_ident

_INT_RE = re.compile(r"[0-9]+")
_IDENT_RE = re.compile(r"[a-zA-Z_]+")

_WHITESPACE = " \t\n\r"

_SINGLE_CHAR: dict[str, TokenKind] = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "!": TokenKind.BANG,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

_TWO_CHAR: dict[str, TokenKind] = {
    "==": TokenKind.EQ,
    "!=": TokenKind.NOT_EQ,
}


class Lexer:
    """Produces tokens on demand from a source string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self._line = 1
        self._line_start = 0

    def next_token(self) -> Token:
        """Return the next token, or EOF once the input is exhausted."""
        self._skip_whitespace()
        source = self.source
        start = self.pos

        if start >= len(source):
            return self._make(TokenKind.EOF, "", start)

        c = source[start]

        two = source[start : start + 2]
        if two in _TWO_CHAR:
            self.pos += 2
            return self._make(_TWO_CHAR[two], two, start)

        if c in _SINGLE_CHAR:
            self.pos += 1
            return self._make(_SINGLE_CHAR[c], c, start)

        m = _IDENT_RE.match(source, start)
        if m:
            word = m.group(0)
            self.pos = m.end()
            return self._make(lookup_ident(word), word, start)

        m = _INT_RE.match(source, start)
        if m:
            self.pos = m.end()
            return self._make(TokenKind.INT, m.group(0), start)

        self.pos += 1
        return self._make(TokenKind.ILLEGAL, c, start)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return

    def _skip_whitespace(self) -> None:
        source = self.source
        n = len(source)
        while self.pos < n and source[self.pos] in _WHITESPACE:
            if source[self.pos] == "\n":
                self._line += 1
                self._line_start = self.pos + 1
            self.pos += 1

    def _make(self, kind: TokenKind, literal: str, start: int) -> Token:
        return Token(kind, literal, start, self._line, start - self._line_start + 1)


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole source string, EOF token included."""
    return list(Lexer(source))

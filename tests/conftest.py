"""Shared pytest fixtures for monkey tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from monkey.core.ast import Program
from monkey.core.environment import Environment
from monkey.core.evaluator import evaluate
from monkey.core.lexer import Lexer
from monkey.core.object import Object
from monkey.core.parser import Parser


def parse_source(source: str) -> tuple[Program, list[str]]:
    """Parse ``source`` on a fresh lexer/parser pair."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors


@pytest.fixture
def parse_clean() -> Callable[[str], Program]:
    """Return a parser that fails the test on any syntax error."""

    def _parse(source: str) -> Program:
        program, errors = parse_source(source)
        assert errors == [], f"parser had errors: {errors}"
        return program

    return _parse


@pytest.fixture
def run_source(parse_clean: Callable[[str], Program]) -> Callable[[str], Object]:
    """Return a helper that parses and evaluates in a fresh scope."""

    def _run(source: str) -> Object:
        return evaluate(parse_clean(source), Environment())

    return _run


@pytest.fixture
def parse_with_errors() -> Callable[[str], tuple[Program, list[str]]]:
    """Return a parser that hands back the program and its error list."""
    return parse_source

"""
monkey - a tree-walking interpreter for the Monkey scripting language.

Source text flows lexer → parser → AST → evaluator:

    from monkey import parse, evaluate

    program = parse("let a = 5; a * 2")
    result = evaluate(program)
    # result.inspect() == "10"
"""

from __future__ import annotations

from ._version import get_version
from .core.environment import Environment
from .core.errors import ConfigError, EvaluationError, MonkeyError, ParseError
from .core.evaluator import evaluate
from .core.lexer import Lexer
from .core.parser import Parser, parse

__version__ = get_version()

__all__ = [
    "__version__",
    "Environment",
    "Lexer",
    "Parser",
    "evaluate",
    "parse",
    "MonkeyError",
    "ParseError",
    "EvaluationError",
    "ConfigError",
]

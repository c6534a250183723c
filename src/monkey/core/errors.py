"""
Host-level error types for the monkey interpreter.

Lexical, syntactic and runtime problems inside a monkey program are reported
as values (ILLEGAL tokens, the parser's error list, Error objects). The
exceptions here cover the boundaries around that pipeline: a caller asking
for a program that failed to parse, a broken config file, or an AST node the
evaluator does not know.
"""

from dataclasses import dataclass


class MonkeyError(Exception):
    """Base exception for all monkey errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(MonkeyError):
    """
    Raised when a caller requires a program that parsed cleanly.

    Carries every diagnostic the parser collected, in order.
    """

    def __init__(
        self,
        errors: list[str],
        context: "ErrorContext | None" = None,
    ):
        self.errors = list(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        lines = [f"parser has {count} {noun}"]
        lines.extend(f"\t{msg}" for msg in self.errors)
        super().__init__("\n".join(lines), context)


class EvaluationError(MonkeyError):
    """
    Raised when the evaluator is handed something outside the AST.

    Operator and type mismatches inside a program are Error objects, not
    this exception.
    """

    pass


class ConfigError(MonkeyError):
    """Raised when monkey.toml cannot be read or holds invalid values."""

    pass


@dataclass
class ErrorContext:
    """
    Source location attached to an error.

    Attributes:
        source_name: File name or "<stdin>"
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line showing the error location
    """

    source_name: str
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "prog.mk:3:5"
        """
        location = f"{self.source_name}:{self.line}:{self.column}"
        if self.snippet is not None:
            prefix = f"{self.line:4d} | "
            marker = " " * (len(prefix) + self.column - 1) + "^^^"
            return f"{location}\n{prefix}{self.snippet}\n{marker}"
        return location

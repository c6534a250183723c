"""
Variable scopes for the evaluator.

An Environment maps names to Objects. An enclosed environment answers
lookups it cannot satisfy by asking its outer one; ``set`` always writes to
the innermost scope.
"""

from __future__ import annotations

from monkey.core.object import Object


class Environment:
    """A name → Object scope with optional parent fallback."""

    def __init__(self, outer: Environment | None = None) -> None:
        self.store: dict[str, Object] = {}
        self.outer = outer

    @classmethod
    def enclosed(cls, outer: Environment) -> Environment:
        """Create a child scope of ``outer``."""
        return cls(outer=outer)

    def get(self, name: str) -> Object | None:
        if name in self.store:
            return self.store[name]
        if self.outer is not None:
            return self.outer.get(name)
        return None

    def set(self, name: str, value: Object) -> Object:
        self.store[name] = value
        return value

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __repr__(self) -> str:
        names = ", ".join(sorted(self.store))
        return f"Environment([{names}], outer={self.outer is not None})"

"""Stack of nested variable scopes."""

from __future__ import annotations

from minicir.core import Value


class ScopeStack:
    """Nested name-to-value scopes; the innermost scope is on top."""

    def __init__(self) -> None:
        self._scopes: list[dict[str, Value]] = []

    def enter_scope(self) -> None:
        """Push a new, empty scope."""
        self._scopes.append({})

    def leave_scope(self) -> None:
        """Pop the innermost scope; raises IndexError when there is none."""
        if not self._scopes:
            raise IndexError("no scope to leave")
        self._scopes.pop()

    def _current(self) -> dict[str, Value]:
        if not self._scopes:
            raise IndexError("no scope entered")
        return self._scopes[-1]

    def insert_value(self, value: Value) -> None:
        """Add ``value`` to the innermost scope under its name; an existing name is kept."""
        self._current().setdefault(value.name, value)

    def find_current_scope(self, name: str) -> Value | None:
        """Look ``name`` up in the innermost scope only."""
        return self._current().get(name)

    def find_all_scopes(self, name: str) -> Value | None:
        """Look ``name`` up from the innermost scope outwards."""
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        return None

    def current_level(self) -> int:
        """Level of the innermost scope, counting from 0."""
        return len(self._scopes) - 1
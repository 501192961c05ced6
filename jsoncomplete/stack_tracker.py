"""
Stack Tracker - Manages the closers owed for open constructs.

Each entry is the single character that will close an open object,
array, or string. Entries are kept in the order the constructs were
opened, so the outermost construct is first.
"""

from typing import List


class StackTracker:
    """
    Ordered stack of owed closing characters.

    The tracker does no validation of its own; the builder states decide
    when to push and pop.
    """

    def __init__(self):
        self._stack: List[str] = []

    @property
    def closers(self) -> str:
        """Owed closers, outermost first."""
        return ''.join(self._stack)

    def push(self, closer: str) -> None:
        """Push the closer for a newly opened construct."""
        self._stack.append(closer)

    def pop(self) -> str:
        """Pop and return the closer of the innermost construct."""
        return self._stack.pop()

    def peek(self) -> str:
        """Return the innermost closer without popping."""
        return self._stack[-1] if self._stack else ''

    def completion(self) -> str:
        """
        Get the suffix that closes every open construct.

        Innermost constructs close first, so this is the stack reversed.
        """
        return ''.join(reversed(self._stack))

    def __len__(self) -> int:
        return len(self._stack)

    def __repr__(self) -> str:
        return f"StackTracker({self.closers!r})"

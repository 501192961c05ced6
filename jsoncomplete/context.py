"""
Context - Holds the received text and renders completed documents.

The content is everything written so far, verbatim. The context also
remembers where the most recent unresolved comma sits, so a render can
drop it along with anything after it.
"""

from typing import List, Optional

WHITESPACE = ' \t\n\r'


class Context:
    """
    Append-only record of the received text.

    Characters are collected in a list and joined when the content is
    read, so appending stays constant time however long the stream gets.
    Rendering never modifies the content; it builds a new string each time.
    """

    def __init__(self):
        self._chunks: List[str] = []
        self._length: int = 0
        self._separator_at: Optional[int] = None

    @property
    def content(self) -> str:
        """Get the received text."""
        if len(self._chunks) > 1:
            self._chunks = [''.join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    @property
    def separator_at(self) -> Optional[int]:
        """Offset of the unresolved trailing comma, or None."""
        return self._separator_at

    @property
    def trailing_separator(self) -> bool:
        """True while a comma has not been followed by a value or closer."""
        return self._separator_at is not None

    def append(self, char: str) -> None:
        """Add a character to the content."""
        self._chunks.append(char)
        self._length += len(char)

    def mark_separator(self) -> None:
        """Record the next character as an unresolved comma."""
        self._separator_at = self._length

    def clear_separator(self) -> None:
        """Forget the unresolved comma, if any."""
        self._separator_at = None

    def render(self, completion: str, pending: int = 0, in_string: bool = False) -> str:
        """
        Build the best-effort closed document.

        Args:
            completion: Closers to append, innermost first.
            pending: Length of an unfinished escape sequence at the end of
                the content. It is left out so the closing quote is not
                read as escaped.
            in_string: Whether the content ends inside an open string.
                Trailing whitespace is string content then and is kept.
        """
        text = self.content
        if self._separator_at is not None:
            text = text[:self._separator_at]
        elif pending:
            text = text[:-pending]

        text = text.lstrip(WHITESPACE)
        if not in_string:
            text = text.rstrip(WHITESPACE)
        return text + completion

    def __len__(self) -> int:
        """Return the length of the content."""
        return self._length

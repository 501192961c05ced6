"""
Builder State Classes - Classify each character and update the stack.

Each state is an object with a handle() method. A state decides the role
of the character (structural, separator, quote, escape, or literal),
updates the owed closers, and transitions. The builder appends the
character to the context after handle() returns, so a state that raises
leaves the builder untouched.
"""

import logging
from typing import TYPE_CHECKING

from .context import WHITESPACE
from .errors import (
    CloserAfterSeparatorError,
    EscapeOutsideStringError,
    MismatchedCloserError,
    StructuralError,
)

if TYPE_CHECKING:
    from .builder import JSONBuilder

logger = logging.getLogger(__name__)

OPENERS = {'{': '}', '[': ']'}
CLOSERS = '}]'
HEX_DIGITS = '0123456789abcdefABCDEF'


class BuilderState:
    """Base class for builder states."""

    name = "base"
    in_string = False
    pending = 0

    def __init__(self, builder: 'JSONBuilder' = None):
        self.builder = builder

    def handle(self, char: str) -> None:
        """Handle a character. Subclasses must implement."""
        raise NotImplementedError

    def _fail(self, error_class, char: str) -> None:
        error: StructuralError = error_class(char, len(self.builder.context))
        logger.debug("Rejecting stream: %s", error)
        raise error


class StructureState(BuilderState):
    """Outside any string: between or inside objects and arrays."""

    name = "STRUCTURE"

    def handle(self, char: str) -> None:
        tracker = self.builder.tracker
        context = self.builder.context

        if char in OPENERS:
            tracker.push(OPENERS[char])
            context.clear_separator()
        elif char == '"':
            tracker.push('"')
            context.clear_separator()
            self.builder._transition(StringState(self.builder))
        elif char in CLOSERS:
            if context.trailing_separator:
                self._fail(CloserAfterSeparatorError, char)
            if tracker.peek() != char:
                self._fail(MismatchedCloserError, char)
            tracker.pop()
        elif char == ',':
            context.mark_separator()
        elif char == '\\':
            self._fail(EscapeOutsideStringError, char)
        elif char not in WHITESPACE:
            # A bare value token (number, true, null) resolves the comma
            context.clear_separator()


class StringState(BuilderState):
    """Inside a quoted string."""

    name = "STRING"
    in_string = True

    def handle(self, char: str) -> None:
        if char == '\\':
            self.builder._transition(EscapeState(self.builder))
        elif char == '"':
            self.builder.tracker.pop()
            self.builder._transition(StructureState(self.builder))


class EscapeState(BuilderState):
    """Just saw a backslash inside a string."""

    name = "ESCAPE"
    in_string = True
    pending = 1

    def handle(self, char: str) -> None:
        if char == 'u':
            self.builder._transition(UnicodeEscapeState(self.builder))
        else:
            self.builder._transition(StringState(self.builder))


class UnicodeEscapeState(BuilderState):
    r"""Reading the hex digits of a \uXXXX escape."""

    name = "UNICODE_ESCAPE"
    in_string = True

    def __init__(self, builder: 'JSONBuilder' = None):
        super().__init__(builder)
        self.digits = 0

    @property
    def pending(self) -> int:
        return 2 + self.digits

    def handle(self, char: str) -> None:
        if char not in HEX_DIGITS:
            # Malformed escape; the decoder will reject it
            state = StringState(self.builder)
            self.builder._transition(state)
            state.handle(char)
            return

        self.digits += 1
        if self.digits == 4:
            self.builder._transition(StringState(self.builder))

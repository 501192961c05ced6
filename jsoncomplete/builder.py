"""
JSON Builder - Completes truncated JSON while it streams in.

Characters are written as they arrive. The builder tracks which objects,
arrays and strings are still open, and can render the text so far with
the missing closers appended, similar to how an editor auto-closes
brackets and quotes.

    builder = JSONBuilder(Answer)
    for chunk in stream:
        builder.write(chunk)
        answer, error = builder.value()
        if error is None:
            show(answer)

Early in a stream the text may be too incomplete to decode; value()
reports that as an error and a later call succeeds once more text is in.
"""

import logging
from typing import Any, Generic, Type, TypeVar

from .context import Context
from .decoders import DecodeFunc, Decoded, pydantic_decode
from .stack_tracker import StackTracker
from .states import BuilderState, StructureState

logger = logging.getLogger(__name__)

T = TypeVar('T')


class JSONBuilder(Generic[T]):
    """
    Assemble a JSON document character by character.

    One builder serves one stream. It is never reset; writing, rendering
    and decoding stay valid after the document is complete.
    """

    def __init__(self, target: Type[T] = Any, decode: DecodeFunc = pydantic_decode):
        if not callable(decode):
            raise TypeError("decode must be callable")

        self.target = target
        self.decode = decode

        self.tracker = StackTracker()
        self.context = Context()

        self._state: BuilderState = StructureState(self)

    @property
    def state(self) -> BuilderState:
        """Current builder state object."""
        return self._state

    @property
    def state_name(self) -> str:
        """Name of current state for debugging."""
        return self._state.name

    @property
    def stack(self) -> str:
        """Closers owed for the open constructs, outermost first."""
        return self.tracker.closers

    @property
    def text(self) -> str:
        """The text received so far, verbatim."""
        return self.context.content

    @property
    def in_string(self) -> bool:
        return self._state.in_string

    @property
    def escape_pending(self) -> bool:
        return self._state.pending > 0

    @property
    def trailing_separator(self) -> bool:
        return self.context.trailing_separator

    def _transition(self, new_state: BuilderState) -> None:
        """Transition to a new state."""
        self._state = new_state

    # ========================================================================
    # WRITING
    # ========================================================================

    def write(self, text: str) -> None:
        """
        Process new characters.

        Chunks may be any size; only the order of characters matters.

        Raises:
            StructuralError: If the text can no longer be the start of a
                valid JSON document. Characters before the offending one
                are kept and the builder stays usable.
        """
        if not text:
            return

        for char in text:
            self._state.handle(char)
            self.context.append(char)

    def write_from_old_new(self, old_text: str, new_text: str) -> None:
        """Convenience method to write the delta between old and new text."""
        if not new_text.startswith(old_text):
            raise ValueError("new_text must start with old_text")
        self.write(new_text[len(old_text):])

    # ========================================================================
    # RENDERING AND DECODING
    # ========================================================================

    def render(self) -> str:
        """
        Return the text so far with every open construct closed.

        The result is a best effort and is not guaranteed to be valid JSON.
        """
        return self.context.render(
            self.tracker.completion(),
            pending=self._state.pending,
            in_string=self._state.in_string,
        )

    def value(self) -> Decoded[T]:
        """
        Decode the rendered document into the target type.

        Returns a Decoded pair. On failure the value is None, not an
        instance of the target built from its defaults, and the error is
        whatever the decode function raised.
        """
        data = self.render().encode('utf-8')
        try:
            return Decoded(self.decode(data, self.target))
        except Exception as e:
            logger.debug("Decode of %d bytes failed: %s", len(data), e)
            return Decoded(None, e)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"JSONBuilder({len(self.context)} chars, "
            f"stack={self.stack!r}, state={self.state_name})"
        )

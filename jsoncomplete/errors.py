"""
Errors - Structural violations detected while writing a stream.

A structural error means the received text is not a prefix of any valid
JSON document, so no amount of further input can complete it.
"""


class JSONBuilderError(Exception):
    """Base class for errors raised by the builder."""


class StructuralError(JSONBuilderError, ValueError):
    """The stream cannot be the beginning of a valid JSON document."""

    reason = "unexpected character"

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"{self.reason}: {char!r} at offset {position}")


class EscapeOutsideStringError(StructuralError):
    reason = "escape character outside of a string"


class CloserAfterSeparatorError(StructuralError):
    reason = "closing bracket directly after a comma"


class MismatchedCloserError(StructuralError):
    reason = "closing bracket does not match any open construct"

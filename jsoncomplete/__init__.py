"""
jsoncomplete - Auto-close truncated JSON streams and decode them early.
"""

import logging

from .builder import JSONBuilder
from .decoders import Decoded, json_decode, pydantic_decode
from .errors import (
    CloserAfterSeparatorError,
    EscapeOutsideStringError,
    JSONBuilderError,
    MismatchedCloserError,
    StructuralError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'JSONBuilder',
    'Decoded',
    'pydantic_decode',
    'json_decode',
    'JSONBuilderError',
    'StructuralError',
    'EscapeOutsideStringError',
    'CloserAfterSeparatorError',
    'MismatchedCloserError',
]
__version__ = '0.1.0'

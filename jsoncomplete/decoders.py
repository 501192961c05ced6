"""
Decoders - Turn a completed document into a typed value.

A decode function takes the document as bytes and a target type, and
returns the decoded value or raises. Any function with that shape can be
given to the builder.
"""

import json as json_module
from functools import lru_cache
from typing import Any, Callable, Generic, NamedTuple, Optional, TypeVar

from pydantic import TypeAdapter

T = TypeVar('T')

DecodeFunc = Callable[[bytes, Any], Any]


class Decoded(NamedTuple, Generic[T]):
    """
    Result of decoding the current document.

    Unpacks as ``value, error``. When the decode fails, value is None and
    error holds the decoder's exception unchanged.
    """

    value: Optional[T]
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the decode error."""
        if self.error is not None:
            raise self.error
        return self.value


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def pydantic_decode(data: bytes, target: Any = Any) -> Any:
    """
    Validate JSON bytes against any type pydantic understands.

    Models, dataclasses, TypedDicts and generic containers all work.
    Syntax errors and shape errors both raise pydantic.ValidationError.
    """
    return _adapter(target).validate_json(data)


def json_decode(data: bytes, target: Any = Any) -> Any:
    """
    Decode with the standard json module.

    If target is a plain class such as dict or list, the decoded value
    must be an instance of it.
    """
    value = json_module.loads(data)
    if target is not Any and isinstance(target, type) and not isinstance(value, target):
        raise TypeError(
            f"expected {target.__name__}, got {type(value).__name__}"
        )
    return value

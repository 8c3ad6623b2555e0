from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("diffson")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.3.0"

from .errors import MalformedPointer, PointerError, PointerResolutionError
from .evaluator import APPEND_MARKER, JsonPointer, array_index, resolve
from .pointer import Pointer, escape_token, format_pointer, parse_pointer, unescape_token
from .policy import (
    UNHANDLED,
    ConstantPolicy,
    FunctionPolicy,
    RecoveryPolicy,
    StrictPolicy,
    as_policy,
)

__all__ = [
    "APPEND_MARKER",
    "ConstantPolicy",
    "FunctionPolicy",
    "JsonPointer",
    "MalformedPointer",
    "Pointer",
    "PointerError",
    "PointerResolutionError",
    "RecoveryPolicy",
    "StrictPolicy",
    "UNHANDLED",
    "array_index",
    "as_policy",
    "escape_token",
    "format_pointer",
    "parse_pointer",
    "resolve",
    "unescape_token",
]

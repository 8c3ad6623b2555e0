"""Exceptions raised while parsing or evaluating JSON Pointers."""

from __future__ import annotations

from typing import Any


class PointerError(Exception):
    """Base exception for all pointer-related errors."""


class MalformedPointer(PointerError, ValueError):
    """Raised when a pointer string violates RFC 6901 syntax."""

    def __init__(self, message: str, pointer: str | None = None) -> None:
        super().__init__(message)
        self.pointer = pointer


class PointerResolutionError(PointerError, LookupError):
    """Raised when a well-formed pointer cannot be resolved against a document.

    ``node`` is the value the evaluator was standing on and ``segment`` the
    path component that could not be followed from it.
    """

    def __init__(self, node: Any, segment: str) -> None:
        super().__init__(f"Cannot resolve segment {segment!r} against {describe_node(node)}")
        self.node = node
        self.segment = segment


def describe_node(node: Any) -> str:
    if isinstance(node, dict):
        return f"object with {len(node)} key(s)"
    if isinstance(node, list):
        return f"array of length {len(node)}"
    if node is None:
        return "null"
    return f"scalar {type(node).__name__}"

"""RFC 6901 JSON Pointer parsing and rendering.

A :class:`Pointer` is an immutable sequence of *unescaped* reference tokens.
Tokens are kept as opaque strings: whether ``"0"`` names an object key or an
array index is only known once the pointer is evaluated against a document.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from .errors import MalformedPointer

# A ``~`` must always introduce one of the two escapes ``~0`` or ``~1``.
_INVALID_ESCAPE = re.compile(r"~(?![01])")


def escape_token(token: str) -> str:
    """Escape a single JSON Pointer token (RFC 6901)."""
    return token.replace("~", "~0").replace("/", "~1")


def unescape_token(token: str) -> str:
    """Unescape a single JSON Pointer token (RFC 6901)."""
    return token.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True, slots=True)
class Pointer:
    """A parsed JSON Pointer.

    The empty pointer refers to the whole document.  Instances are hashable
    and every derived pointer (:meth:`child`, :attr:`parent`) is a new object.
    """

    segments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        segments = self.segments
        if isinstance(segments, str):
            raise TypeError("Pointer segments must be an iterable of strings, not a string")
        segments = tuple(segments)
        for segment in segments:
            if not isinstance(segment, str):
                raise TypeError(f"Pointer segment must be str, got {type(segment).__name__}")
        object.__setattr__(self, "segments", segments)

    @classmethod
    def of(cls, *segments: str) -> Pointer:
        return cls(segments)

    @classmethod
    def root(cls) -> Pointer:
        return cls(())

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def last(self) -> str | None:
        """The final segment, or ``None`` for the root pointer."""
        return self.segments[-1] if self.segments else None

    @property
    def parent(self) -> Pointer:
        """The pointer to the container holding this pointer's target."""
        if not self.segments:
            raise MalformedPointer("The root pointer has no parent", "")
        return Pointer(self.segments[:-1])

    def child(self, segment: str | int) -> Pointer:
        """Return a new pointer extended by *segment*.

        Integers are rendered as decimal array indices.
        """
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            raise TypeError(f"Pointer segment must be str or int, got {type(segment).__name__}")
        if isinstance(segment, int):
            if segment < 0:
                raise ValueError(f"Array index must be non-negative, got {segment}")
            segment = str(segment)
        return Pointer((*self.segments, segment))

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Pointer: ...

    def __getitem__(self, index: int | slice) -> str | Pointer:
        if isinstance(index, slice):
            return Pointer(self.segments[index])
        return self.segments[index]

    def __str__(self) -> str:
        return format_pointer(self.segments)


def format_pointer(segments: Iterable[str]) -> str:
    """Build a JSON Pointer string from raw (unescaped) tokens."""
    tokens = list(segments)
    if not tokens:
        return ""
    return "/" + "/".join(escape_token(token) for token in tokens)


def parse_pointer(text: str | Pointer | None) -> Pointer:
    """Parse a JSON Pointer string into a :class:`Pointer`.

    ``None`` and ``""`` both denote the document root.  An already-parsed
    :class:`Pointer` is returned unchanged.

    Raises
    ------
    MalformedPointer
        If *text* is non-empty and does not start with ``/``, or if any
        ``~`` is not followed by ``0`` or ``1``.
    """
    if isinstance(text, Pointer):
        return text
    if text is None or text == "":
        return Pointer.root()
    if not text.startswith("/"):
        raise MalformedPointer(f"JSON Pointer must start with '/' or be empty, got: {text!r}", text)

    # The element before the leading '/' is always empty.
    raw = text.split("/")[1:]
    # Validate the escaped text before substituting anything.
    for token in raw:
        if _INVALID_ESCAPE.search(token):
            raise MalformedPointer(
                f"Occurrences of '~' must be followed by '0' or '1' in JSON Pointer {text!r}",
                text,
            )
    return Pointer(tuple(unescape_token(token) for token in raw))

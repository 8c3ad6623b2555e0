"""Evaluate JSON Pointers against in-memory JSON documents.

:class:`JsonPointer` binds a recovery policy at construction and walks a
document segment by segment.  Evaluation is iterative, so pointer length is
not limited by the interpreter's recursion limit, and the input document is
never modified.

Example::

    from diffson import ConstantPolicy, JsonPointer

    strict = JsonPointer()
    strict.evaluate({"a": [1, 2, 3]}, "/a/1")   # 2
    strict.evaluate({"a": [1, 2, 3]}, "/a/5")   # raises PointerResolutionError

    lenient = JsonPointer(ConstantPolicy(None))
    lenient.evaluate({"a": [1, 2, 3]}, "/a/5")  # None
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Callable
from typing import Any

from pydantic import JsonValue, TypeAdapter

from .errors import describe_node
from .pointer import Pointer, parse_pointer
from .policy import RecoveryPolicy, as_policy

logger = logging.getLogger(__name__)

APPEND_MARKER = "-"

_ARRAY_INDEX = re.compile(r"0|[1-9][0-9]*")

# No list can hold more than sys.maxsize elements.
_MAX_INDEX_DIGITS = len(str(sys.maxsize))

_JSON_ADAPTER: TypeAdapter[JsonValue] = TypeAdapter(JsonValue)


def array_index(segment: str) -> int | None:
    """Return the array index denoted by *segment*, or ``None``.

    Only ``0`` and ``[1-9][0-9]*`` qualify; leading zeros, signs and
    non-ASCII digits are rejected.  Digit strings too long to index any
    list also yield ``None``, so they are never handed to ``int()``.
    """
    if len(segment) > _MAX_INDEX_DIGITS or _ARRAY_INDEX.fullmatch(segment) is None:
        return None
    return int(segment)


class JsonPointer:
    """Pointer evaluator with a fixed recovery policy.

    Parameters
    ----------
    policy
        A :class:`~diffson.policy.RecoveryPolicy`, a ``(node, segment)``
        callable, or ``None`` for :class:`~diffson.policy.StrictPolicy`.
    """

    __slots__ = ("_policy",)

    def __init__(self, policy: RecoveryPolicy | Callable[[Any, str], Any] | None = None) -> None:
        self._policy = as_policy(policy)

    @property
    def policy(self) -> RecoveryPolicy:
        return self._policy

    def __repr__(self) -> str:
        return f"JsonPointer(policy={self._policy!r})"

    @staticmethod
    def parse(text: str | Pointer | None) -> Pointer:
        return parse_pointer(text)

    def evaluate(self, value: Any, path: str | Pointer) -> Any:
        """Return the node of *value* referenced by *path*.

        Unresolvable segments are handed to the bound policy and evaluation
        continues on whatever it returns.

        Raises
        ------
        MalformedPointer
            If *path* is a string that is not a valid JSON Pointer.
        PointerResolutionError
            If a segment cannot be resolved and the policy is strict.
        """
        pointer = parse_pointer(path)
        segments = pointer.segments
        current = value
        for position, segment in enumerate(segments):
            if isinstance(current, dict):
                if segment in current:
                    current = current[segment]
                    continue
            elif isinstance(current, list) and segment != APPEND_MARKER:
                idx = array_index(segment)
                if idx is not None and idx < len(current):
                    current = current[idx]
                    continue
            current = self._recover(current, segment, position)
        return current

    def evaluate_json(self, text: str | bytes, path: str | Pointer) -> Any:
        """Parse a raw JSON document and evaluate *path* against it.

        Raises
        ------
        pydantic.ValidationError
            If *text* is not valid JSON.
        """
        pointer = parse_pointer(path)
        return self.evaluate(_JSON_ADAPTER.validate_json(text), pointer)

    def _recover(self, node: Any, segment: str, position: int) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Recovering segment %r at position %d against %s",
                segment,
                position,
                describe_node(node),
            )
        return self._policy.resolve(node, segment)


def resolve(
    value: Any,
    path: str | Pointer,
    *,
    policy: RecoveryPolicy | Callable[[Any, str], Any] | None = None,
) -> Any:
    """Evaluate *path* against *value* with a freshly constructed evaluator."""
    return JsonPointer(policy).evaluate(value, path)


__all__ = ["APPEND_MARKER", "JsonPointer", "array_index", "resolve"]

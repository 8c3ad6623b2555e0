"""Recovery policies for unresolved pointer segments.

The evaluator hands a segment to its policy whenever it cannot be followed
(missing key, index out of range, the ``-`` append marker, or a segment that
does not fit the node's type).  Whatever the policy returns becomes the node
the remaining segments are evaluated against; raising aborts evaluation.

Two flavours ship here:

* :class:`StrictPolicy` -- the default; every gap is a
  :class:`~diffson.errors.PointerResolutionError`.
* Lenient policies -- :class:`ConstantPolicy` substitutes a value (``None``
  for "treat missing as null", ``{}`` to synthesize containers) and
  :class:`FunctionPolicy` adapts an arbitrary callable.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .errors import PointerResolutionError


class _Unhandled:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNHANDLED"


UNHANDLED: Any = _Unhandled()
"""Returned by a :class:`FunctionPolicy` callable to decline a segment."""


@runtime_checkable
class RecoveryPolicy(Protocol):
    def resolve(self, node: Any, segment: str) -> Any: ...


@dataclass(frozen=True, slots=True)
class StrictPolicy:
    """Fail on any unresolved segment."""

    def resolve(self, node: Any, segment: str) -> Any:
        raise PointerResolutionError(node, segment)


@dataclass(frozen=True, slots=True)
class ConstantPolicy:
    """Substitute *value* for every unresolved segment.

    Each invocation returns a fresh deep copy so that mutable replacements
    (``{}``, ``[]``) are never shared between calls.
    """

    value: Any = None

    def resolve(self, node: Any, segment: str) -> Any:
        return copy.deepcopy(self.value)


@dataclass(frozen=True, slots=True)
class FunctionPolicy:
    """Adapt a ``(node, segment) -> value`` callable into a policy.

    The callable is treated as a partial function: returning
    :data:`UNHANDLED` leaves the segment to the strict behaviour.
    """

    func: Callable[[Any, str], Any]

    def resolve(self, node: Any, segment: str) -> Any:
        result = self.func(node, segment)
        if result is UNHANDLED:
            raise PointerResolutionError(node, segment)
        return result


def as_policy(policy: RecoveryPolicy | Callable[[Any, str], Any] | None) -> RecoveryPolicy:
    """Normalize ``None``, a policy object, or a plain callable into a policy."""
    if policy is None:
        return StrictPolicy()
    if isinstance(policy, type):
        raise TypeError(
            f"Expected a RecoveryPolicy, a callable, or None, got the class {policy.__name__}"
        )
    if isinstance(policy, RecoveryPolicy):
        return policy
    if callable(policy):
        return FunctionPolicy(policy)
    raise TypeError(
        f"Expected a RecoveryPolicy, a callable, or None, got {type(policy).__name__}"
    )


__all__ = [
    "UNHANDLED",
    "ConstantPolicy",
    "FunctionPolicy",
    "RecoveryPolicy",
    "StrictPolicy",
    "as_policy",
]

"""Fallback identity inference for retraction.

When an object renounces a type without an explicit fallback, it is tagged with
a generic baseline chosen by its structural category. Extra resolvers are
consulted first, in order, so callers can add categories of their own.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from morphic.core.descriptor.models import RECORD, SEQUENCE
from morphic.core.types import Identity

type BaselinePredicate = Callable[[Any], bool]
type BaselineResolver = tuple[BaselinePredicate, Identity]


def is_sequence_like(obj: Any) -> bool:
    """Check if obj is a sequence record (text and byte strings excluded)."""
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


DEFAULT_RESOLVERS: tuple[BaselineResolver, ...] = ((is_sequence_like, SEQUENCE),)


def infer_baseline(obj: Any, resolvers: Iterable[BaselineResolver] = ()) -> Identity:
    """Pick the baseline identity for an object.

    Args:
        obj: Object being retracted.
        resolvers: Additional (predicate, identity) pairs checked before the defaults.

    Returns:
        Identity of the first matching resolver, RECORD if none match.
    """
    for predicate, baseline in (*resolvers, *DEFAULT_RESOLVERS):
        if predicate(obj):
            return baseline
    return RECORD

"""Pure functions for structural membership.

Membership is a set containment question: does the set of capability names an
object exposes contain every name a descriptor requires?
"""

from __future__ import annotations

from collections.abc import Iterable, Set
from typing import Any

from morphic.core.fields import fields_of


def available_capabilities(obj: Any, names: Iterable[str]) -> frozenset[str]:
    """Collect which of the given names an object exposes as callables.

    Args:
        obj: Object to inspect. Never mutated.
        names: Candidate capability names.

    Returns:
        Subset of names whose field on obj is callable.
    """
    fields = fields_of(obj)
    return frozenset(name for name in names if callable(fields.get(name)))


def capabilities_satisfied(
    available: Set[str], required: Set[str], *, vacuous: bool = True
) -> bool:
    """Check that available capabilities cover the required ones.

    Args:
        available: Capability names the object exposes.
        required: Capability names the descriptor requires.
        vacuous: Result for an empty required set.

    Returns:
        True if every required name is available.
    """
    if not required:
        return vacuous
    return required <= available


def missing_capabilities(available: Set[str], required: Set[str]) -> frozenset[str]:
    """Required capability names the object lacks.

    Returns:
        Names in required but not in available.
    """
    return frozenset(required - available)

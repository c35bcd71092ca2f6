"""Structural equality for nested builder configuration values.

Configuration payloads are trees of scalars, sequences and mappings. Two
payloads are equal when their trees are equal: mapping key order is
irrelevant, sequence order is significant, and ``list``/``tuple`` are
interchangeable. Booleans are kept distinct from integers so that
``{"x": True}`` and ``{"x": 1}`` describe different configurations.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import Any

_SCALAR_TYPES = (str, bytes, bytearray)
_MAPPING_TAG = "mapping"
_SEQUENCE_TAG = "sequence"
_SET_TAG = "set"


def deep_equals(left: Any, right: Any) -> bool:
    """Return whether two configuration trees are structurally equal."""

    if left is right:
        return True
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        return _mappings_equal(left, right)
    if _is_sequence(left) or _is_sequence(right):
        return _sequences_equal(left, right)
    if isinstance(left, Set) or isinstance(right, Set):
        return _sets_equal(left, right)
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return bool(left == right)


def deep_hash(value: Any) -> int:
    """Hash a configuration tree consistently with :func:`deep_equals`."""

    if isinstance(value, Mapping):
        entries = frozenset((deep_hash(key), deep_hash(item)) for key, item in value.items())
        return hash((_MAPPING_TAG, entries))
    if _is_sequence(value):
        return hash((_SEQUENCE_TAG, tuple(deep_hash(item) for item in value)))
    if isinstance(value, Set):
        return hash((_SET_TAG, frozenset(deep_hash(item) for item in value)))
    try:
        return hash(value)
    except TypeError:
        # Unhashable leaves fall back to their type; equality still decides.
        return hash(type(value).__qualname__)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_TYPES)


def _mappings_equal(left: Any, right: Any) -> bool:
    if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
        return False
    if len(left) != len(right):
        return False
    for key, value in left.items():
        if key not in right:
            return False
        if not deep_equals(value, right[key]):
            return False
    return True


def _sequences_equal(left: Any, right: Any) -> bool:
    if not (_is_sequence(left) and _is_sequence(right)):
        return False
    if len(left) != len(right):
        return False
    return all(deep_equals(a, b) for a, b in zip(left, right, strict=True))


def _sets_equal(left: Any, right: Any) -> bool:
    if not (isinstance(left, Set) and isinstance(right, Set)):
        return False
    if len(left) != len(right):
        return False
    unmatched = list(right)
    for item in left:
        for index, candidate in enumerate(unmatched):
            if deep_equals(item, candidate):
                del unmatched[index]
                break
        else:
            return False
    return True


__all__ = ["deep_equals", "deep_hash"]

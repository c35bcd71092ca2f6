"""Shared type aliases for the domain layer."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

PackageName = str
ConfigMapping = Mapping[str, Any]
BuildExtensions = Mapping[str, Sequence[str]]

__all__ = [
    "BuildExtensions",
    "ConfigMapping",
    "PackageName",
]

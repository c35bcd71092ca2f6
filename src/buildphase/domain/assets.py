"""Asset identifiers."""

from __future__ import annotations

import posixpath
from typing import Annotated

from pydantic import Field, field_validator

from .base import DomainModel

_SEPARATOR = "|"


class AssetId(DomainModel):
    """Identifies a file-like asset by owning package and package-relative path."""

    package: Annotated[str, Field(min_length=1)]
    path: Annotated[str, Field(min_length=1)]

    @field_validator("path")
    @classmethod
    def normalize_path(cls, value: str) -> str:
        candidate = value.replace("\\", "/")
        if candidate.startswith("/"):
            msg = f"Asset paths must be relative to their package, got {value!r}"
            raise ValueError(msg)
        normalized = posixpath.normpath(candidate)
        if normalized == "." or normalized == ".." or normalized.startswith("../"):
            msg = f"Asset path {value!r} does not point inside its package"
            raise ValueError(msg)
        return normalized

    @classmethod
    def parse(cls, serialized: str) -> AssetId:
        """Build an id from its ``package|path`` form."""

        package, sep, path = serialized.partition(_SEPARATOR)
        if not sep:
            msg = f"Expected 'package{_SEPARATOR}path', got {serialized!r}"
            raise ValueError(msg)
        return cls(package=package, path=path)

    def __str__(self) -> str:
        return f"{self.package}{_SEPARATOR}{self.path}"


__all__ = ["AssetId"]

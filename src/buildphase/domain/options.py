"""Builder configuration payloads."""

from __future__ import annotations

from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any

from pydantic import Field, field_validator

from buildphase.equality import deep_equals, deep_hash

from .base import DomainModel


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, Set):
        return frozenset(_freeze(item) for item in value)
    return value


def _empty_config() -> Mapping[str, Any]:
    return MappingProxyType({})


class BuilderOptions(DomainModel):
    """Parsed configuration handed to a builder.

    The payload is opaque here: it is stored, compared and merged but never
    interpreted. Equality and hashing are structural over the nested config.
    The stored config is a read-only copy: nested mappings become read-only
    views and sequences become tuples.
    """

    config: Mapping[str, Any] = Field(default_factory=_empty_config)
    is_root: bool = False

    @field_validator("config", mode="plain")
    @classmethod
    def freeze_config(cls, value: Any) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            msg = f"Builder config must be a mapping, got {type(value).__name__}"
            raise ValueError(msg)
        for key in value:
            if not isinstance(key, str):
                msg = f"Builder config keys must be strings, got {key!r}"
                raise ValueError(msg)
        return _freeze(value)

    @classmethod
    def empty(cls) -> BuilderOptions:
        return cls()

    def override_with(self, other: BuilderOptions | None) -> BuilderOptions:
        """Layer ``other``'s top-level keys over this config."""

        if other is None:
            return self
        merged = {**self.config, **other.config}
        return BuilderOptions(config=merged, is_root=self.is_root or other.is_root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuilderOptions):
            return NotImplemented
        return self.is_root == other.is_root and deep_equals(self.config, other.config)

    def __hash__(self) -> int:
        return hash((deep_hash(self.config), self.is_root))


__all__ = ["BuilderOptions"]

"""Include/exclude predicate over asset identifiers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pathspec import PathSpec
from pydantic import PrivateAttr, field_validator

from buildphase.domain import AssetId, DomainModel

from .patterns import compile_patterns, matches_any


class InputMatcher(DomainModel):
    """Selects assets whose path matches an include glob and no exclude glob.

    An empty include list selects every asset that is not excluded.
    """

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    _include_spec: PathSpec | None = PrivateAttr(default=None)
    _exclude_spec: PathSpec | None = PrivateAttr(default=None)

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def coerce_patterns(cls, value: Iterable[str] | None) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,) if value else ()
        return tuple(pattern for pattern in value if pattern)

    def model_post_init(self, __context: Any) -> None:
        self._include_spec = compile_patterns(self.include)
        self._exclude_spec = compile_patterns(self.exclude)

    @classmethod
    def from_patterns(
        cls,
        include: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
    ) -> InputMatcher:
        return cls(include=include, exclude=exclude)

    def matches(self, asset_id: AssetId) -> bool:
        return self._matches_includes(asset_id.path) and not matches_any(
            self._exclude_spec, asset_id.path
        )

    def _matches_includes(self, path: str) -> bool:
        if self._include_spec is None:
            return True
        return matches_any(self._include_spec, path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputMatcher):
            return NotImplemented
        return self.include == other.include and self.exclude == other.exclude

    def __hash__(self) -> int:
        return hash((self.include, self.exclude))

    def __str__(self) -> str:
        if self.include:
            rendered = f"assets matching {_render(self.include)}"
        else:
            rendered = "any assets"
        if self.exclude:
            rendered += f" except {_render(self.exclude)}"
        return rendered


def _render(patterns: tuple[str, ...]) -> str:
    return "[" + ", ".join(patterns) + "]"


__all__ = ["InputMatcher"]

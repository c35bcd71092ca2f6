"""Builder contract as seen by build actions."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .types import BuildExtensions


@runtime_checkable
class Builder(Protocol):
    """A transformation from primary input assets to generated outputs.

    Build actions never invoke ``build``; they only need the builder's
    runtime type name for identity and ``str(builder)`` for diagnostics.
    """

    build_extensions: BuildExtensions

    def build(self, build_step: Any) -> Any: ...


def builder_type_name(builder: object) -> str:
    """Return the identity key used when comparing builders.

    Two builders of the same class compare as the same builder even when
    their internal state differs; configuration that should affect identity
    belongs in ``BuilderOptions``.
    """

    return type(builder).__name__


__all__ = ["Builder", "builder_type_name"]

"""Build actions: a builder bound to a package and a set of primary inputs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from buildphase.domain import (
    AssetId,
    Builder,
    BuilderOptions,
    ConfigMapping,
    PackageName,
    builder_type_name,
)
from buildphase.equality import deep_equals, deep_hash
from buildphase.exceptions import InvalidConfigurationError
from buildphase.matching import InputMatcher


@dataclass(frozen=True, eq=False)
class BuildAction:
    """A phase in the build graph: run ``builder`` on ``package``.

    ``is_optional`` actions only run when a later phase reads one of their
    outputs or uses one as a primary input. ``hide_output`` actions write to
    the build cache instead of the source tree, which is what allows them to
    target packages other than the root.

    Two actions are the same phase when their builders share a runtime type
    name and every other component is structurally equal. Builder instances
    of one class with different internal state compare equal; such state must
    be surfaced through ``builder_options`` to affect identity.
    """

    builder: Builder
    package: PackageName
    input_matcher: InputMatcher = field(default_factory=InputMatcher)
    builder_options: BuilderOptions = field(default_factory=BuilderOptions.empty)
    is_optional: bool = False
    hide_output: bool = False
    builder_type_name: str = field(init=False)

    def __post_init__(self) -> None:
        if self.builder is None:
            msg = f"Build action for package {self.package!r} has no builder"
            raise InvalidConfigurationError(msg)
        if not isinstance(self.package, str) or not self.package:
            msg = f"Build action for {self.builder} needs a package name, got {self.package!r}"
            raise InvalidConfigurationError(msg)
        if not isinstance(self.input_matcher, InputMatcher):
            msg = f"Build action for {self.builder} needs an InputMatcher, got {self.input_matcher!r}"
            raise InvalidConfigurationError(msg)
        object.__setattr__(self, "builder_options", _coerce_options(self.builder_options))
        object.__setattr__(self, "is_optional", bool(self.is_optional))
        object.__setattr__(self, "hide_output", bool(self.hide_output))
        object.__setattr__(self, "builder_type_name", builder_type_name(self.builder))

    @classmethod
    def create(
        cls,
        builder: Builder,
        package: PackageName,
        *,
        include: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
        builder_options: BuilderOptions | ConfigMapping | None = None,
        is_optional: bool | None = False,
        hide_output: bool | None = False,
    ) -> BuildAction:
        """Bind ``builder`` to the assets of ``package`` selected by the globs.

        Assets matching ``include`` (everything, when omitted) and none of
        ``exclude`` are primary inputs.
        """

        return cls(
            builder=builder,
            package=package,
            input_matcher=InputMatcher.from_patterns(include=include, exclude=exclude),
            builder_options=_coerce_options(builder_options),
            is_optional=bool(is_optional),
            hide_output=bool(hide_output),
        )

    def matches(self, asset_id: AssetId) -> bool:
        """Return whether this action claims ``asset_id`` as a primary input."""

        return asset_id.package == self.package and self.input_matcher.matches(asset_id)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BuildAction):
            return NotImplemented
        return (
            self.builder_type_name == other.builder_type_name
            and self.package == other.package
            and self.input_matcher == other.input_matcher
            and self.is_optional == other.is_optional
            and self.hide_output == other.hide_output
            and deep_equals(self.builder_options.config, other.builder_options.config)
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.builder_type_name,
                self.package,
                self.input_matcher,
                self.is_optional,
                self.hide_output,
                deep_hash(self.builder_options.config),
            )
        )

    def __str__(self) -> str:
        settings = []
        if self.is_optional:
            settings.append("optional")
        if self.hide_output:
            settings.append("hidden")
        rendered = f"{self.builder} on {self.input_matcher}"
        if settings:
            rendered += f" [{', '.join(settings)}]"
        return rendered


def _coerce_options(value: BuilderOptions | ConfigMapping | None) -> BuilderOptions:
    if value is None:
        return BuilderOptions.empty()
    if isinstance(value, BuilderOptions):
        return value
    if isinstance(value, Mapping):
        return BuilderOptions(config=value)
    msg = f"Builder options must be BuilderOptions or a mapping, got {type(value).__name__}"
    raise InvalidConfigurationError(msg)


__all__ = ["BuildAction"]

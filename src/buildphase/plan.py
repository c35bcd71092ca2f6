"""Ordered build actions for a single build invocation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from buildphase.actions import BuildAction
from buildphase.config import BuildSettings
from buildphase.domain import AssetId, PackageName
from buildphase.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildPlan:
    """Phases in execution order, scoped to a root package."""

    actions: tuple[BuildAction, ...]
    root_package: PackageName
    strict_outputs: bool = field(default=True, compare=False)

    def __post_init__(self) -> None:
        if not self.root_package:
            msg = "A build plan needs a root package"
            raise InvalidConfigurationError(msg)
        object.__setattr__(self, "actions", tuple(self.actions))

    @classmethod
    def from_settings(
        cls, actions: Iterable[BuildAction], settings: BuildSettings
    ) -> BuildPlan:
        if settings.root_package is None:
            msg = "BUILDPHASE_ROOT_PACKAGE must be set to assemble a build plan"
            raise InvalidConfigurationError(msg)
        return cls(
            actions=tuple(actions),
            root_package=settings.root_package,
            strict_outputs=settings.strict_outputs,
        )

    def validate(self) -> BuildPlan:
        """Reject phases that would write into another package's source tree."""

        if not self.strict_outputs:
            return self
        for index, action in enumerate(self.actions):
            if action.hide_output or action.package == self.root_package:
                continue
            logger.warning(
                "Phase %d (%s) targets package %s but does not hide its output",
                index,
                action,
                action.package,
            )
            msg = (
                f"Build action {action} operates on package {action.package!r}, but the "
                f"root package is {self.root_package!r}. Generating files for another "
                "package requires hide_output=True."
            )
            raise InvalidConfigurationError(msg)
        return self

    def actions_matching(self, asset_id: AssetId) -> tuple[BuildAction, ...]:
        """Phases that claim ``asset_id`` as a primary input, in phase order."""

        return tuple(action for action in self.actions if action.matches(asset_id))

    def first_changed_phase(self, previous: BuildPlan | Sequence[BuildAction]) -> int | None:
        """Index of the first phase that differs from ``previous``, if any."""

        old = previous.actions if isinstance(previous, BuildPlan) else tuple(previous)
        for index, (before, after) in enumerate(zip(old, self.actions)):
            if before != after:
                logger.debug("Phase %d changed: %s -> %s", index, before, after)
                return index
        if len(old) != len(self.actions):
            logger.debug("Phase count changed: %d -> %d", len(old), len(self.actions))
            return min(len(old), len(self.actions))
        return None

    def is_unchanged_from(self, previous: BuildPlan | Sequence[BuildAction]) -> bool:
        return self.first_changed_phase(previous) is None

    def deduplicated(self) -> BuildPlan:
        """Drop repeated phases, keeping the first occurrence of each."""

        seen: set[BuildAction] = set()
        unique: list[BuildAction] = []
        for action in self.actions:
            if action in seen:
                logger.debug("Dropping duplicate phase %s", action)
                continue
            seen.add(action)
            unique.append(action)
        return BuildPlan(
            actions=tuple(unique),
            root_package=self.root_package,
            strict_outputs=self.strict_outputs,
        )


__all__ = ["BuildPlan"]

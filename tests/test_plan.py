from __future__ import annotations

import logging
from typing import Any

import pytest

from buildphase import AssetId, BuildAction, BuildPlan, BuildSettings, InvalidConfigurationError


class CopyBuilder:
    build_extensions = {".txt": [".copy"]}

    def build(self, build_step: Any) -> None:
        return None


class CompileBuilder:
    build_extensions = {".src": [".out"]}

    def build(self, build_step: Any) -> None:
        return None


def _copy(package: str = "app", **kwargs: Any) -> BuildAction:
    return BuildAction.create(CopyBuilder(), package, include=["**/*.txt"], **kwargs)


def _compile(package: str = "app", **kwargs: Any) -> BuildAction:
    return BuildAction.create(CompileBuilder(), package, include=["src/**"], **kwargs)


def test_validate_accepts_root_and_hidden_actions() -> None:
    plan = BuildPlan(actions=(_copy(), _compile("dep", hide_output=True)), root_package="app")
    assert plan.validate() is plan


def test_validate_rejects_visible_output_in_other_package(
    caplog: pytest.LogCaptureFixture,
) -> None:
    plan = BuildPlan(actions=(_copy(), _compile("dep")), root_package="app")

    with caplog.at_level(logging.WARNING, logger="buildphase.plan"):
        with pytest.raises(InvalidConfigurationError, match="hide_output"):
            plan.validate()
    assert "targets package dep" in caplog.text


def test_validate_skipped_when_not_strict() -> None:
    plan = BuildPlan(actions=(_compile("dep"),), root_package="app", strict_outputs=False)
    assert plan.validate() is plan


def test_plan_requires_root_package() -> None:
    with pytest.raises(InvalidConfigurationError):
        BuildPlan(actions=(), root_package="")


def test_actions_matching_preserves_phase_order() -> None:
    everything = BuildAction.create(CompileBuilder(), "app", is_optional=True)
    plan = BuildPlan(actions=(_copy(), _compile(), everything), root_package="app")

    matched = plan.actions_matching(AssetId(package="app", path="notes/a.txt"))
    assert matched == (plan.actions[0], everything)
    assert plan.actions_matching(AssetId(package="dep", path="notes/a.txt")) == ()


def test_first_changed_phase() -> None:
    previous = BuildPlan(actions=(_copy(), _compile()), root_package="app")

    assert BuildPlan(actions=(_copy(), _compile()), root_package="app").is_unchanged_from(previous)
    changed = BuildPlan(
        actions=(_copy(), _compile(builder_options={"mode": "release"})), root_package="app"
    )
    assert changed.first_changed_phase(previous) == 1
    shorter = BuildPlan(actions=(_copy(),), root_package="app")
    assert shorter.first_changed_phase(previous) == 1
    assert previous.first_changed_phase([_copy(is_optional=True)]) == 0


def test_deduplicated_keeps_first_occurrence() -> None:
    first = _copy()
    plan = BuildPlan(actions=(first, _compile(), _copy()), root_package="app")

    unique = plan.deduplicated()
    assert unique.actions == (first, plan.actions[1])
    assert unique.actions[0] is first


def test_from_settings_uses_root_package() -> None:
    settings = BuildSettings(root_package="app", strict_outputs=False)
    plan = BuildPlan.from_settings([_compile("dep")], settings)

    assert plan.root_package == "app"
    assert plan.strict_outputs is False
    assert plan.validate() is plan


def test_from_settings_requires_root_package() -> None:
    with pytest.raises(InvalidConfigurationError):
        BuildPlan.from_settings([], BuildSettings())

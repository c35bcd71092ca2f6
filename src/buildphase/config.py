"""Lightweight build configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class BuildSettings:
    """Immutable configuration sourced from environment variables."""

    root_package: str | None = None
    log_level: str = "INFO"
    strict_outputs: bool = True

    @classmethod
    def from_env(cls) -> BuildSettings:
        return cls(
            root_package=os.getenv("BUILDPHASE_ROOT_PACKAGE") or None,
            log_level=os.getenv("BUILDPHASE_LOG_LEVEL", cls.log_level).upper(),
            strict_outputs=_env_bool("BUILDPHASE_STRICT_OUTPUTS", True),
        )

    def configure_logging(self) -> None:
        logging.getLogger("buildphase").setLevel(self.log_level)


__all__ = ["BuildSettings"]

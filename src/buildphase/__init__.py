"""Build actions and input matching for incremental build graphs."""

from .actions import BuildAction
from .config import BuildSettings
from .domain import AssetId, Builder, BuilderOptions, builder_type_name
from .equality import deep_equals, deep_hash
from .exceptions import BuildConfigError, InvalidConfigurationError, PatternSyntaxError
from .matching import InputMatcher
from .plan import BuildPlan

__all__ = [
    "AssetId",
    "BuildAction",
    "BuildConfigError",
    "BuildPlan",
    "BuildSettings",
    "Builder",
    "BuilderOptions",
    "InputMatcher",
    "InvalidConfigurationError",
    "PatternSyntaxError",
    "builder_type_name",
    "deep_equals",
    "deep_hash",
]

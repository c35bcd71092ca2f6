"""Asset matching exports."""

from .input_matcher import InputMatcher
from .patterns import PATTERN_STYLE, AssetGlobPattern, compile_patterns

__all__ = ["PATTERN_STYLE", "AssetGlobPattern", "InputMatcher", "compile_patterns"]

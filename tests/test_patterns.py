from __future__ import annotations

import pytest

from buildphase.exceptions import PatternSyntaxError
from buildphase.matching import AssetGlobPattern, compile_patterns


def _matches(pattern: str, path: str) -> bool:
    spec = compile_patterns([pattern])
    assert spec is not None
    return spec.match_file(path)


@pytest.mark.parametrize(
    ("pattern", "path", "expected"),
    [
        ("lib/*.dart", "lib/a.dart", True),
        ("lib/*.dart", "lib/src/a.dart", False),
        ("lib/**.dart", "lib/src/deep/a.dart", True),
        ("lib/**", "lib/src/a.dart", True),
        ("**/*.g.dart", "a.g.dart", True),
        ("**/*.g.dart", "lib/src/a.g.dart", True),
        ("**/*.g.dart", "lib/src/a.dart", False),
        ("lib/?.dart", "lib/a.dart", True),
        ("lib/?.dart", "lib/ab.dart", False),
        ("lib/[ab].dart", "lib/b.dart", True),
        ("lib/[!ab].dart", "lib/b.dart", False),
        ("lib/[a-c].dart", "lib/c.dart", True),
        ("lib/*.{dart,txt}", "lib/a.txt", True),
        ("lib/*.{dart,txt}", "lib/a.md", False),
        ("{lib,web}/**.{dart,{html,css}}", "web/x/y.css", True),
        ("lib/\\*.dart", "lib/*.dart", True),
        ("lib/\\*.dart", "lib/a.dart", False),
        ("lib/a.dart", "lib/a.dart", True),
        ("a.dart", "lib/a.dart", False),
    ],
)
def test_glob_matching(pattern: str, path: str, expected: bool) -> None:
    assert _matches(pattern, path) is expected


def test_character_class_never_matches_separator() -> None:
    assert not _matches("lib[!a]b", "lib/b")
    assert not _matches("lib[/]b", "lib/b")


@pytest.mark.parametrize("pattern", ["[unclosed", "lib/{a,b", "lib/a\\", "lib/[z-a].dart", "[]"])
def test_malformed_patterns_raise(pattern: str) -> None:
    with pytest.raises(PatternSyntaxError) as excinfo:
        compile_patterns([pattern])
    assert excinfo.value.pattern == pattern


def test_compile_patterns_returns_none_without_patterns() -> None:
    assert compile_patterns([]) is None


def test_pattern_to_regex_is_anchored() -> None:
    regex, include = AssetGlobPattern.pattern_to_regex("lib/*.dart")
    assert include is True
    assert regex.startswith("^")
    assert regex.endswith("$")

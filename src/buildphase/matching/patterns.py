"""Glob patterns over package-relative asset paths.

Patterns are matched against the whole posix path of an asset:

- ``*`` matches any run of characters except ``/`` and ``?`` a single one.
- ``**`` matches across directories; ``**/`` may also match no directory
  at all, so ``**/*.g.dart`` matches ``a.g.dart``.
- ``[a-z]``, ``[!a]`` and ``[^a]`` are character classes that never match ``/``.
- ``{a,b}`` matches either alternative; alternatives nest.
- ``\\`` escapes the next character.

The syntax is compiled to a regular expression and plugged into pathspec as
the ``assetglob`` pattern style.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import NoReturn

from pathspec import PathSpec
from pathspec.pattern import RegexPattern
from pathspec.util import register_pattern

from buildphase.exceptions import PatternSyntaxError

PATTERN_STYLE = "assetglob"


class _GlobTranslator:
    """Recursive-descent translation of one glob into regex source."""

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._pos = 0
        self._brace_depth = 0

    def translate(self) -> str:
        return f"^{self._sequence()}$"

    def _fail(self, reason: str) -> NoReturn:
        msg = f"Invalid glob {self._pattern!r} at offset {self._pos}: {reason}"
        raise PatternSyntaxError(msg, pattern=self._pattern)

    def _sequence(self) -> str:
        parts: list[str] = []
        pattern = self._pattern
        while self._pos < len(pattern):
            char = pattern[self._pos]
            if self._brace_depth and char in ",}":
                break
            if char == "*":
                parts.append(self._star())
            elif char == "?":
                parts.append("[^/]")
                self._pos += 1
            elif char == "[":
                parts.append(self._char_class())
            elif char == "{":
                parts.append(self._alternation())
            elif char == "\\":
                if self._pos + 1 >= len(pattern):
                    self._fail("dangling escape")
                parts.append(re.escape(pattern[self._pos + 1]))
                self._pos += 2
            else:
                parts.append(re.escape(char))
                self._pos += 1
        return "".join(parts)

    def _star(self) -> str:
        pattern = self._pattern
        if pattern.startswith("**", self._pos):
            self._pos += 2
            at_segment_start = self._pos == 2 or pattern[self._pos - 3] == "/"
            if at_segment_start and pattern.startswith("/", self._pos):
                self._pos += 1
                return "(?:.*/)?"
            return ".*"
        self._pos += 1
        return "[^/]*"

    def _char_class(self) -> str:
        pattern = self._pattern
        start = self._pos
        self._pos += 1
        negated = False
        if self._pos < len(pattern) and pattern[self._pos] in "!^":
            negated = True
            self._pos += 1
        items: list[str] = []
        first = True
        while True:
            if self._pos >= len(pattern):
                self._pos = start
                self._fail("unclosed character class")
            char = pattern[self._pos]
            if char == "]" and not first:
                self._pos += 1
                break
            first = False
            low = self._class_char()
            if (
                self._pos + 1 < len(pattern)
                and pattern[self._pos] == "-"
                and pattern[self._pos + 1] != "]"
            ):
                self._pos += 1
                high = self._class_char()
                if ord(high) < ord(low):
                    self._fail(f"invalid range {low}-{high}")
                items.append(f"{re.escape(low)}-{re.escape(high)}")
            else:
                items.append(re.escape(low))
        body = "".join(items)
        if negated:
            return f"[^/{body}]"
        return f"(?!/)[{body}]"

    def _class_char(self) -> str:
        pattern = self._pattern
        char = pattern[self._pos]
        if char == "\\":
            if self._pos + 1 >= len(pattern):
                self._fail("dangling escape")
            char = pattern[self._pos + 1]
            self._pos += 2
            return char
        self._pos += 1
        return char

    def _alternation(self) -> str:
        start = self._pos
        self._pos += 1
        self._brace_depth += 1
        options = [self._sequence()]
        while self._pos < len(self._pattern) and self._pattern[self._pos] == ",":
            self._pos += 1
            options.append(self._sequence())
        if self._pos >= len(self._pattern):
            self._pos = start
            self._fail("unclosed alternation")
        self._pos += 1
        self._brace_depth -= 1
        return "(?:" + "|".join(options) + ")"


class AssetGlobPattern(RegexPattern):
    """pathspec pattern implementing asset glob syntax."""

    __slots__ = ()

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> tuple[str, bool]:
        if not isinstance(pattern, str):
            msg = f"Glob patterns must be strings, got {type(pattern).__name__}"
            raise PatternSyntaxError(msg, pattern=str(pattern))
        return _GlobTranslator(pattern).translate(), True


register_pattern(PATTERN_STYLE, AssetGlobPattern)


def compile_patterns(patterns: Iterable[str]) -> PathSpec | None:
    """Compile patterns into a spec, or ``None`` when there are none."""

    lines = list(patterns)
    if not lines:
        return None
    return PathSpec.from_lines(PATTERN_STYLE, lines)


def matches_any(spec: PathSpec | None, path: str) -> bool:
    if spec is None:
        return False
    return spec.match_file(path)


__all__ = ["PATTERN_STYLE", "AssetGlobPattern", "compile_patterns", "matches_any"]

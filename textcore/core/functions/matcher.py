# textcore/core/functions/matcher.py
"""
Matcher - Shared matching abstraction for text and table search

Both search engines match through one interface with two variants:

- PlainMatcher: literal pattern, ordinal comparison. Case-insensitive
  comparison upper-cases each code point (fold_case), so match
  offsets and lengths always refer to the original text.
- RegexMatcher: regular expression compiled with the `regex` library,
  IGNORECASE when not case sensitive, every evaluation bounded by a
  wall-clock timeout.

Module Components:
- SearchOptions: pattern and flags shared by all search operations
- MatchLocation / TextCursor / CellLocation: positions in text and grids
- Matcher: abstract matching capability
- build_matcher(): choose the variant for a SearchOptions

Usage:
    from textcore.core.functions.matcher import SearchOptions, build_matcher

    matcher = build_matcher(SearchOptions("cat", case_sensitive=False))
    location = matcher.find("Cat sat", 0)   # MatchLocation(start=0, length=3)
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple

import regex

from textcore.core.functions.errors import InvalidPattern, SearchTimeout

logger = logging.getLogger("text-core.Search")

# Wall-clock bounds for regex evaluation (seconds)
DEFAULT_REGEX_TIMEOUT = 5.0
DEFAULT_REPLACE_ALL_TIMEOUT = 30.0


# ============================================================================
# Data Classes
# ============================================================================

@dataclass
class SearchOptions:
    """Search settings shared by text and table search.

    Attributes:
        pattern: Search string or regular expression
        case_sensitive: Match case exactly
        use_regex: Treat pattern as a regular expression
        regex_timeout: Bound for single find/replace evaluations
        replace_all_timeout: Bound for replace-all evaluations
    """
    pattern: str
    case_sensitive: bool = False
    use_regex: bool = False
    regex_timeout: Optional[float] = DEFAULT_REGEX_TIMEOUT
    replace_all_timeout: Optional[float] = DEFAULT_REPLACE_ALL_TIMEOUT


@dataclass(frozen=True)
class MatchLocation:
    """A match in flat text."""
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class TextCursor:
    """Caller-owned selection (start offset and length)."""
    start: int = 0
    length: int = 0

    @property
    def end(self) -> int:
        return self.start + self.length

    @classmethod
    def from_match(cls, match: MatchLocation) -> "TextCursor":
        return cls(match.start, match.length)


class CellLocation(NamedTuple):
    """A cell in a grid."""
    row: int
    column: int


# ============================================================================
# Case Folding
# ============================================================================

def _upper_char(ch: str) -> str:
    upper = ch.upper()
    # Multi-character expansions (e.g. "ß" -> "SS") keep the original character
    return upper if len(upper) == 1 else ch


def fold_case(text: str) -> str:
    """
    Upper-case text one code point at a time.

    The result has the same length as the input, so offsets found in the
    folded text apply to the original.
    """
    if text.isascii():
        return text.upper()
    return "".join(_upper_char(ch) for ch in text)


# ============================================================================
# Matcher Interface
# ============================================================================

class Matcher(ABC):
    """Uniform matching capability over plain and regex patterns."""

    def __init__(self, pattern: str, case_sensitive: bool):
        self.pattern = pattern
        self.case_sensitive = case_sensitive

    @abstractmethod
    def find(self, text: str, pos: int = 0) -> Optional[MatchLocation]:
        """First match starting at or after pos."""
        pass

    @abstractmethod
    def find_prev(self, text: str, before: int) -> Optional[MatchLocation]:
        """Last match before `before`, else the last match in text.

        Plain matches must end at or before `before`; regex matches only
        need to start before it.
        """
        pass

    @abstractmethod
    def find_all(self, text: str) -> List[MatchLocation]:
        """All non-overlapping matches, left to right."""
        pass

    @abstractmethod
    def full_match(self, text: str) -> bool:
        """Whether the whole text is one match of the pattern."""
        pass

    @abstractmethod
    def replace_all(self, text: str, replacement: str) -> Tuple[str, int]:
        """Replace every non-overlapping match; return (new_text, count)."""
        pass

    @abstractmethod
    def expand_full(self, text: str, replacement: str) -> Optional[str]:
        """Substitution for text if the whole text is one match, else None."""
        pass

    def contains(self, text: str) -> bool:
        """Whether the pattern matches anywhere in text."""
        return self.find(text, 0) is not None

    def count(self, text: str) -> int:
        return len(self.find_all(text))


# ============================================================================
# Plain Matcher
# ============================================================================

class PlainMatcher(Matcher):
    """Literal pattern matcher (ordinal / ordinal-ignore-case)."""

    def __init__(self, pattern: str, case_sensitive: bool = False):
        if not pattern:
            raise ValueError("Search pattern must not be empty")
        super().__init__(pattern, case_sensitive)
        self._key = pattern if case_sensitive else fold_case(pattern)

    def _haystack(self, text: str) -> str:
        return text if self.case_sensitive else fold_case(text)

    def find(self, text: str, pos: int = 0) -> Optional[MatchLocation]:
        if pos > len(text):
            return None
        index = self._haystack(text).find(self._key, pos)
        return MatchLocation(index, len(self._key)) if index >= 0 else None

    def find_prev(self, text: str, before: int) -> Optional[MatchLocation]:
        haystack = self._haystack(text)
        return self._find_last(haystack, before) or self._find_last(haystack, len(haystack))

    def _find_last(self, haystack: str, before: int) -> Optional[MatchLocation]:
        """Last occurrence lying entirely before `before`."""
        index = haystack.rfind(self._key, 0, max(before, 0))
        return MatchLocation(index, len(self._key)) if index >= 0 else None

    def find_all(self, text: str) -> List[MatchLocation]:
        return list(self._iter_matches(self._haystack(text)))

    def _iter_matches(self, haystack: str) -> Iterator[MatchLocation]:
        pos = 0
        while True:
            index = haystack.find(self._key, pos)
            if index < 0:
                return
            yield MatchLocation(index, len(self._key))
            pos = index + len(self._key)

    def full_match(self, text: str) -> bool:
        return self._haystack(text) == self._key

    def replace_all(self, text: str, replacement: str) -> Tuple[str, int]:
        if self.case_sensitive:
            return text.replace(self.pattern, replacement), text.count(self.pattern)

        # Case-insensitive: copy untouched spans, splice the replacement in
        parts = []
        count = 0
        prev = 0
        for location in self._iter_matches(fold_case(text)):
            parts.append(text[prev:location.start])
            parts.append(replacement)
            prev = location.end
            count += 1
        parts.append(text[prev:])
        return "".join(parts), count

    def expand_full(self, text: str, replacement: str) -> Optional[str]:
        return replacement if self.full_match(text) else None


# ============================================================================
# Regex Matcher
# ============================================================================

class RegexMatcher(Matcher):
    """Regular expression matcher with a wall-clock bound per evaluation.

    Raises:
        InvalidPattern: on construction, if the pattern does not compile
        SearchTimeout: from any evaluation exceeding the timeout
    """

    def __init__(
        self,
        pattern: str,
        case_sensitive: bool = False,
        timeout: Optional[float] = DEFAULT_REGEX_TIMEOUT,
    ):
        super().__init__(pattern, case_sensitive)
        self.timeout = timeout
        flags = regex.VERSION0
        if not case_sensitive:
            flags |= regex.IGNORECASE
        try:
            self._compiled = regex.compile(pattern, flags)
        except regex.error as e:
            raise InvalidPattern(pattern, str(e)) from e

    @contextmanager
    def _bounded(self):
        try:
            yield
        except TimeoutError as e:
            logger.warning(f"Regex evaluation timed out: pattern={self.pattern!r}, timeout={self.timeout}")
            raise SearchTimeout(self.pattern, self.timeout) from e

    def find(self, text: str, pos: int = 0) -> Optional[MatchLocation]:
        if pos > len(text):
            return None
        with self._bounded():
            m = self._compiled.search(text, pos, timeout=self.timeout)
        return MatchLocation(m.start(), m.end() - m.start()) if m else None

    def find_prev(self, text: str, before: int) -> Optional[MatchLocation]:
        # One forward pass serves both the preceding match and the wrap target
        matches = self.find_all(text)
        if not matches:
            return None
        for location in reversed(matches):
            if location.start < before:
                return location
        return matches[-1]

    def find_all(self, text: str) -> List[MatchLocation]:
        with self._bounded():
            return [
                MatchLocation(m.start(), m.end() - m.start())
                for m in self._compiled.finditer(text, timeout=self.timeout)
            ]

    def full_match(self, text: str) -> bool:
        with self._bounded():
            return self._compiled.fullmatch(text, timeout=self.timeout) is not None

    def replace_all(self, text: str, replacement: str) -> Tuple[str, int]:
        with self._bounded():
            try:
                return self._compiled.subn(replacement, text, timeout=self.timeout)
            except (regex.error, IndexError) as e:
                raise InvalidPattern(self.pattern, f"invalid replacement {replacement!r}: {e}") from e

    def expand_full(self, text: str, replacement: str) -> Optional[str]:
        with self._bounded():
            m = self._compiled.fullmatch(text, timeout=self.timeout)
        if m is None:
            return None
        try:
            return m.expand(replacement)
        except (regex.error, IndexError) as e:
            raise InvalidPattern(self.pattern, f"invalid replacement {replacement!r}: {e}") from e


# ============================================================================
# Factory
# ============================================================================

def build_matcher(options: SearchOptions, timeout: Optional[float] = None) -> Matcher:
    """
    Build the matcher variant for a set of search options.

    Args:
        options: Search options (pattern must not be empty)
        timeout: Regex bound overriding options.regex_timeout

    Returns:
        PlainMatcher or RegexMatcher

    Raises:
        InvalidPattern: If use_regex is set and the pattern does not compile
    """
    if options.use_regex:
        bound = timeout if timeout is not None else options.regex_timeout
        return RegexMatcher(options.pattern, options.case_sensitive, bound)
    return PlainMatcher(options.pattern, options.case_sensitive)


__all__ = [
    "DEFAULT_REGEX_TIMEOUT",
    "DEFAULT_REPLACE_ALL_TIMEOUT",
    "SearchOptions",
    "MatchLocation",
    "TextCursor",
    "CellLocation",
    "fold_case",
    "Matcher",
    "PlainMatcher",
    "RegexMatcher",
    "build_matcher",
]

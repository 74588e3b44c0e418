# textcore/core/processor/search_helper/text_search.py
"""
Text Search - Find and replace over flat text

TextSearchEngine keeps no state between calls: the caller owns the text
and the selection (TextCursor) and passes both in on every call.

Search semantics:
- find_next searches forward from the end of the selection, then wraps
  to the start of the text. A match that starts before the search origin
  is accepted on wrap, so a lone occurrence is found again.
- find_prev returns the last match before the selection (a plain match
  must end at the selection start), or the last match in the text when
  nothing precedes it.
- replace_current only substitutes when the selection is itself a whole
  match, then moves on with find_next.
- replace_all substitutes every non-overlapping match.

An empty pattern finds nothing and replaces nothing.

Usage:
    from textcore.core.processor.search_helper.text_search import TextSearchEngine
    from textcore.core.functions.matcher import SearchOptions, TextCursor

    engine = TextSearchEngine()
    options = SearchOptions("cat")
    match = engine.find_next("cat sat cat", TextCursor(), options)
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from textcore.core.functions.matcher import (
    Matcher,
    MatchLocation,
    SearchOptions,
    TextCursor,
    build_matcher,
)

logger = logging.getLogger("text-core.Search")


@dataclass(frozen=True)
class ReplaceResult:
    """Outcome of replace_current.

    Attributes:
        text: Text after the operation (unchanged when nothing was replaced)
        cursor: Next match, or the current selection when there is none
        replaced: Whether a substitution happened
        match: Next match found after the operation
    """
    text: str
    cursor: TextCursor
    replaced: bool
    match: Optional[MatchLocation]


class TextSearchEngine:
    """Stateless plain/regex search and replace over a string."""

    def find_next(
        self, text: str, cursor: TextCursor, options: SearchOptions
    ) -> Optional[MatchLocation]:
        """
        Find the next match after the selection, wrapping to the start.

        Args:
            text: Text to search
            cursor: Current selection
            options: Search options

        Returns:
            MatchLocation, or None when the pattern is empty or absent

        Raises:
            InvalidPattern: Regex does not compile
            SearchTimeout: Regex evaluation exceeded options.regex_timeout
        """
        if not options.pattern:
            return None
        return self._find_next(build_matcher(options), text, cursor)

    def _find_next(self, matcher: Matcher, text: str, cursor: TextCursor) -> Optional[MatchLocation]:
        origin = min(max(cursor.end, 0), len(text))

        location = matcher.find(text, origin)
        skipped = None
        # An empty match at an empty selection would be found forever
        if location is not None and location.length == 0 and cursor.length == 0 and location.start == origin:
            skipped = location
            location = matcher.find(text, origin + 1)

        if location is None:
            location = matcher.find(text, 0)
            if location is not None and location.start >= origin:
                location = None

        # The skipped empty match is the only one left
        return location or skipped

    def find_prev(
        self, text: str, cursor: TextCursor, options: SearchOptions
    ) -> Optional[MatchLocation]:
        """
        Find the last match before the selection, wrapping to the end.

        Raises:
            InvalidPattern: Regex does not compile
            SearchTimeout: Regex evaluation exceeded options.regex_timeout
        """
        if not options.pattern:
            return None
        return build_matcher(options).find_prev(text, cursor.start)

    def replace_current(
        self,
        text: str,
        cursor: TextCursor,
        options: SearchOptions,
        replacement: str,
    ) -> ReplaceResult:
        """
        Replace the selection if it is a whole match, then find the next match.

        Regex replacements honor group references (\\1, \\g<name>).

        Args:
            text: Text to edit
            cursor: Current selection
            options: Search options
            replacement: Replacement text or template

        Returns:
            ReplaceResult with the new text and the next selection

        Raises:
            InvalidPattern: Regex or replacement template is invalid
            SearchTimeout: Regex evaluation exceeded options.regex_timeout
        """
        if not options.pattern:
            return ReplaceResult(text, cursor, False, None)

        matcher = build_matcher(options)
        selected = text[cursor.start:cursor.end]
        substituted = matcher.expand_full(selected, replacement)

        replaced = substituted is not None
        if replaced:
            text = text[:cursor.start] + substituted + text[cursor.end:]
            cursor = TextCursor(cursor.start, len(substituted))
            logger.debug(f"Replaced selection at {cursor.start}")

        match = self._find_next(matcher, text, cursor)
        next_cursor = TextCursor.from_match(match) if match else cursor
        return ReplaceResult(text, next_cursor, replaced, match)

    def replace_all(
        self, text: str, options: SearchOptions, replacement: str
    ) -> Tuple[str, int]:
        """
        Replace every non-overlapping match.

        Regex evaluation is bounded by options.replace_all_timeout. On
        failure an exception is raised and no text is returned, so the
        caller's text stays as it was.

        Returns:
            Tuple of (new_text, replacement_count)

        Raises:
            InvalidPattern: Regex or replacement template is invalid
            SearchTimeout: Regex evaluation exceeded the bound
        """
        if not options.pattern:
            return text, 0

        matcher = build_matcher(options, timeout=options.replace_all_timeout)
        new_text, count = matcher.replace_all(text, replacement)
        logger.info(f"Replaced {count} occurrence(s) of {options.pattern!r}")
        return new_text, count

"""Tests for the plain and regex matchers."""
import pytest

from textcore.core.functions.errors import InvalidPattern, SearchTimeout
from textcore.core.functions.matcher import (
    MatchLocation,
    PlainMatcher,
    RegexMatcher,
    SearchOptions,
    build_matcher,
    fold_case,
)


# Catastrophic backtracking under the regex engine
BACKTRACKING = r"(a|aa)+c"
SLOW_TEXT = "a" * 60


class TestBuildMatcher:
    """Variant selection"""

    def test_plain(self):
        matcher = build_matcher(SearchOptions("a"))
        assert isinstance(matcher, PlainMatcher)

    def test_regex_uses_option_timeout(self):
        matcher = build_matcher(SearchOptions("a+", use_regex=True, regex_timeout=2.0))
        assert isinstance(matcher, RegexMatcher)
        assert matcher.timeout == 2.0

    def test_timeout_override(self):
        matcher = build_matcher(SearchOptions("a+", use_regex=True), timeout=30.0)
        assert matcher.timeout == 30.0

    def test_empty_plain_pattern_rejected(self):
        with pytest.raises(ValueError):
            PlainMatcher("")


class TestPlainMatcher:
    """Ordinal matching"""

    def test_find_case_sensitive(self):
        matcher = PlainMatcher("cat", case_sensitive=True)
        assert matcher.find("Cat cat", 0) == MatchLocation(4, 3)

    def test_find_case_insensitive(self):
        matcher = PlainMatcher("cat")
        assert matcher.find("Cat cat", 0) == MatchLocation(0, 3)
        assert matcher.find("Cat cat", 1) == MatchLocation(4, 3)

    def test_find_past_end(self):
        assert PlainMatcher("a").find("aaa", 10) is None

    def test_find_prev(self):
        matcher = PlainMatcher("cat", case_sensitive=True)
        assert matcher.find_prev("cat sat cat", 8) == MatchLocation(0, 3)
        assert matcher.find_prev("cat sat cat", 11) == MatchLocation(8, 3)

    def test_find_prev_skips_match_overlapping_cursor(self):
        """A match must end at or before the cursor; otherwise wrap to the last."""
        matcher = PlainMatcher("aa")
        assert PlainMatcher("cat").find_prev("cat sat cat", 9) == MatchLocation(0, 3)
        assert matcher.find_prev("aaa", 1) == MatchLocation(1, 2)
        assert matcher.find_prev("aaaa", 3) == MatchLocation(1, 2)

    def test_find_prev_wraps_to_last(self):
        matcher = PlainMatcher("CAT")
        assert matcher.find_prev("cat sat cat", 0) == MatchLocation(8, 3)

    def test_find_all_non_overlapping(self):
        matcher = PlainMatcher("aa", case_sensitive=True)
        assert matcher.find_all("aaaa") == [MatchLocation(0, 2), MatchLocation(2, 2)]
        assert matcher.count("aaaaa") == 2

    def test_full_match(self):
        assert PlainMatcher("Cat").full_match("cAT")
        assert not PlainMatcher("Cat", case_sensitive=True).full_match("cat")
        assert not PlainMatcher("cat").full_match("cats")

    def test_replace_all_case_insensitive(self):
        """AAA with a -> b gives bbb, 3 replacements."""
        assert PlainMatcher("a").replace_all("AAA", "b") == ("bbb", 3)

    def test_replace_all_case_sensitive(self):
        assert PlainMatcher("a", case_sensitive=True).replace_all("aAa", "b") == ("bAb", 2)

    def test_replacement_is_literal(self):
        assert PlainMatcher("x").replace_all("x", r"\1") == (r"\1", 1)

    def test_non_ascii_case_folding_keeps_offsets(self):
        matcher = PlainMatcher("äbc")
        assert matcher.find_all("ÄBC äbc") == [MatchLocation(0, 3), MatchLocation(4, 3)]
        assert matcher.replace_all("ÄBC äbc", "x") == ("x x", 2)

    def test_kelvin_sign_is_not_k(self):
        assert PlainMatcher("k").find("\u212a", 0) is None
        assert PlainMatcher("K").find("\u212a k", 0) == MatchLocation(2, 1)

    def test_sharp_s_does_not_expand(self):
        assert PlainMatcher("ss").find("Straße", 0) is None
        assert PlainMatcher("STRAßE").full_match("straße")

    def test_regex_metacharacters_are_literal(self):
        assert PlainMatcher("a.c").find("abc a.c", 0) == MatchLocation(4, 3)


class TestRegexMatcher:
    """regex-module matching with a time bound"""

    def test_ignore_case(self):
        assert RegexMatcher(r"c\w+").find("Cat", 0) == MatchLocation(0, 3)
        assert RegexMatcher(r"c\w+", case_sensitive=True).find("Cat", 0) is None

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPattern) as exc_info:
            RegexMatcher("(unclosed")
        assert exc_info.value.pattern == "(unclosed"
        assert exc_info.value.message

    def test_find_prev(self):
        matcher = RegexMatcher(r"\d+")
        assert matcher.find_prev("a1 b22 c333", 7) == MatchLocation(4, 2)
        assert matcher.find_prev("a1 b22 c333", 1) == MatchLocation(8, 3)
        assert matcher.find_prev("abc", 2) is None

    def test_replace_all_groups(self):
        matcher = RegexMatcher(r"(\w+)@(\w+)")
        assert matcher.replace_all("me@home you@work", r"\2:\1") == ("home:me work:you", 2)

    def test_invalid_replacement(self):
        with pytest.raises(InvalidPattern):
            RegexMatcher(r"(a)").replace_all("a", r"\2")

    def test_full_match_is_anchored(self):
        matcher = RegexMatcher("a|ab")
        assert matcher.full_match("ab")
        assert not matcher.full_match("abc")

    def test_expand_full(self):
        matcher = RegexMatcher(r"(\d+)-(\d+)")
        assert matcher.expand_full("12-34", r"\2-\1") == "34-12"
        assert matcher.expand_full("12-34x", r"\2-\1") is None

    def test_timeout_becomes_search_timeout(self):
        matcher = RegexMatcher(BACKTRACKING, timeout=0.5)
        with pytest.raises(SearchTimeout) as exc_info:
            matcher.find(SLOW_TEXT, 0)
        assert exc_info.value.timeout == 0.5
        assert exc_info.value.pattern == BACKTRACKING

    @pytest.mark.parametrize("call", [
        lambda m: m.find_all(SLOW_TEXT),
        lambda m: m.find_prev(SLOW_TEXT, 10),
        lambda m: m.full_match(SLOW_TEXT),
        lambda m: m.replace_all(SLOW_TEXT, "b"),
        lambda m: m.expand_full(SLOW_TEXT, "b"),
    ])
    def test_every_evaluation_is_bounded(self, call):
        with pytest.raises(TimeoutError):
            call(RegexMatcher(BACKTRACKING, timeout=0.5))


class TestFoldCase:
    """Per-code-point upper-casing"""

    @pytest.mark.parametrize("text, folded", [
        ("abc", "ABC"),
        ("äbc", "ÄBC"),
        ("straße", "STRAßE"),
        ("\u212a", "\u212a"),
        ("日本", "日本"),
    ])
    def test_fold(self, text, folded):
        assert fold_case(text) == folded
        assert len(fold_case(text)) == len(text)

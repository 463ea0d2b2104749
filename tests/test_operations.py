"""
Operation Tests

Tests for the public operations with real matchers:
- break_on_first
- split_cap
- stream_edit
- find_all, any_till, sep_cap
- Error propagation and call ordering
"""

import pytest

from streamedit import (
    LiteralSegment,
    MatchSegment,
    any_till,
    break_on_first,
    empty,
    find_all,
    function_matcher,
    get_offset,
    integer,
    literal,
    regex,
    sep_cap,
    split_cap,
    stream_edit,
)
from streamedit.types import MatchResult, MatcherContractError


class TestBreakOnFirst:
    """Tests for break_on_first."""

    def test_splits_around_needle(self):
        """The first match splits the input into prefix, value and suffix."""
        assert break_on_first("hay needle hay", literal("needle")) == ("hay ", "needle", " hay")

    def test_only_first_match(self):
        """Later matches stay in the suffix."""
        assert break_on_first("a1b2", integer()) == ("a", 1, "b2")

    def test_no_match(self):
        """None when the matcher succeeds nowhere."""
        assert break_on_first("hay hay", literal("needle")) is None

    def test_empty_input(self):
        """Empty input with a consuming matcher has no match."""
        assert break_on_first("", literal("x")) is None

    def test_zero_width_match_returned_as_is(self):
        """A zero-width match is not forced forward."""
        assert break_on_first("abc", get_offset()) == ("", 0, "abc")

    def test_match_at_end_of_input(self):
        """The end-of-input offset is tried too."""
        prefix, _, suffix = break_on_first("abc", regex("$"))
        assert (prefix, suffix) == ("abc", "")


class TestSplitCap:
    """Tests for split_cap."""

    def test_integers_in_hay(self):
        """Matched integers are typed values between literal segments."""
        assert split_cap("hay 1 straw 2 hay", integer()) == [
            LiteralSegment("hay "),
            MatchSegment(1),
            LiteralSegment(" straw "),
            MatchSegment(2),
            LiteralSegment(" hay"),
        ]

    def test_offsets_of_single_codepoint(self):
        """Offsets are counted in codepoints, newlines included."""
        matcher = get_offset().then(literal("X")).map(lambda pair: pair[0])
        assert split_cap(".X...\n...X.", matcher) == [
            LiteralSegment("."),
            MatchSegment(1),
            LiteralSegment("...\n..."),
            MatchSegment(9),
            LiteralSegment("."),
        ]

    def test_offsets_beyond_bmp(self):
        """A codepoint outside the BMP counts as one offset."""
        matcher = get_offset().then(literal("X")).map(lambda pair: pair[0])
        segments = split_cap("\U0001f600X", matcher)
        assert segments == [LiteralSegment("\U0001f600"), MatchSegment(1)]

    def test_no_match_is_single_literal(self):
        """Without matches the whole input is one literal."""
        assert split_cap("only hay", integer()) == [LiteralSegment("only hay")]

    def test_empty_input_is_single_empty_literal(self):
        """Empty input gives one empty literal."""
        assert split_cap("", integer()) == [LiteralSegment("")]

    def test_adjacent_matches_have_no_empty_literals(self):
        """No empty literal segment appears between adjacent matches."""
        assert split_cap("ab", literal("a") | literal("b")) == [
            MatchSegment("a"),
            MatchSegment("b"),
        ]

    def test_zero_width_everywhere(self):
        """An always-empty matcher interleaves matches with every codepoint."""
        assert split_cap("ab", empty(0)) == [
            MatchSegment(0),
            LiteralSegment("a"),
            MatchSegment(0),
            LiteralSegment("b"),
            MatchSegment(0),
        ]

    def test_trailing_carry_kept(self):
        """Codepoints forced past a final zero-width match stay in the output."""
        segments = split_cap("ab", regex(r"(?=a)").map(lambda m: "^"))
        assert segments == [MatchSegment("^"), LiteralSegment("ab")]

    def test_case_insensitive_literal(self):
        """Case-insensitive literals report the source text."""
        assert split_cap("Hay HAY", literal("hay", ignore_case=True)) == [
            MatchSegment("Hay"),
            LiteralSegment(" "),
            MatchSegment("HAY"),
        ]


class TestStreamEdit:
    """Tests for stream_edit."""

    def test_uppercase_needle(self):
        """Each match is replaced by the editor's output."""
        assert stream_edit("hay needle hay", literal("needle"), str.upper) == "hay NEEDLE hay"

    def test_no_match_returns_input(self):
        """Input without matches is returned unchanged."""
        assert stream_edit("hay", literal("needle"), str.upper) == "hay"

    def test_empty_input(self):
        """Empty input stays empty."""
        assert stream_edit("", literal("needle"), str.upper) == ""

    def test_regex_group_expansion(self):
        """Editors receive re.Match values from regex matchers."""
        result = stream_edit(
            "from 2024-01-05 to 2024-02-10",
            regex(r"(\d+)-(\d+)-(\d+)"),
            lambda m: m.expand(r"\3/\2/\1"),
        )
        assert result == "from 05/01/2024 to 10/02/2024"

    def test_typed_values(self):
        """Typed values can be transformed before rendering."""
        assert stream_edit("3 apples, 4 pears", integer(), lambda n: str(n * 2)) == "6 apples, 8 pears"

    def test_zero_width_matches_like_re_sub(self):
        """Empty matches are placed the way re.sub places them."""
        assert stream_edit("abxd", regex("x*"), lambda m: "-") == "-a-b--d-"

    def test_editor_called_in_text_order(self, call_log):
        """The editor sees matches left to right, once each."""

        def editor(value):
            call_log.append(value)
            return str(value)

        stream_edit("1 2 3 4", integer(), editor)
        assert call_log == [1, 2, 3, 4]

    def test_matcher_calls_precede_editor_calls(self, recording_digit, call_log):
        """The scan finishes before the first edit."""

        def editor(value):
            call_log.append(("edit", value))
            return "#"

        assert stream_edit("1a2", recording_digit, editor) == "#a#"
        assert call_log == [
            ("try", 0),
            ("try", 1),
            ("try", 2),
            ("try", 3),
            ("edit", 1),
            ("edit", 2),
        ]

    def test_editor_exception_propagates(self):
        """An editor failure aborts the whole edit."""

        def editor(value):
            if value == 2:
                raise RuntimeError("editor failed")
            return "ok"

        with pytest.raises(RuntimeError, match="editor failed"):
            stream_edit("1 2 3", integer(), editor)

    def test_editor_must_return_text(self):
        """Non-string editor output is rejected."""
        with pytest.raises(TypeError, match="expected str"):
            stream_edit("1", integer(), lambda n: n)

    def test_async_editor_rejected(self):
        """A coroutine editor needs stream_edit_async."""

        async def editor(value):
            return "x"

        with pytest.raises(TypeError, match="_async"):
            stream_edit("1", integer(), editor)

    def test_editor_stop_iteration_propagates(self):
        """StopIteration from an editor is an error, not the end of the edit."""
        replacements = iter(["A"])

        with pytest.raises(StopIteration):
            stream_edit("1 2", integer(), lambda value: next(replacements))


class TestMatcherFailures:
    """Tests for matcher exceptions and contract violations."""

    def test_matcher_exception_propagates(self):
        """A matcher exception aborts split_cap."""

        def parse(text, pos):
            if pos == 2:
                raise LookupError("lookup failed")
            return None

        with pytest.raises(LookupError):
            split_cap("abcd", function_matcher(parse))

    def test_matcher_stop_iteration_propagates(self):
        """StopIteration from a matcher is not read as "no match"."""

        def parse(text, pos):
            if pos == 1:
                raise StopIteration
            return None

        with pytest.raises(StopIteration):
            break_on_first("abc", function_matcher(parse))
        with pytest.raises(StopIteration):
            split_cap("abc", function_matcher(parse))

    def test_end_before_start_rejected(self):
        """A matcher may not move backwards."""
        matcher = function_matcher(lambda text, pos: MatchResult("v", pos - 1) if pos else None)
        with pytest.raises(MatcherContractError) as exc_info:
            split_cap("ab", matcher)
        assert exc_info.value.context.position == 1

    def test_end_past_input_rejected(self):
        """A matcher may not claim input that does not exist."""
        matcher = function_matcher(lambda text, pos: MatchResult("v", len(text) + 1))
        with pytest.raises(MatcherContractError):
            stream_edit("ab", matcher, str)

    def test_wrong_result_type_rejected(self):
        """parse() must return a MatchResult or None."""
        matcher = function_matcher(lambda text, pos: ("v", pos + 1))
        with pytest.raises(MatcherContractError, match="expected MatchResult"):
            break_on_first("ab", matcher)

    def test_async_matcher_rejected_in_sync_operation(self):
        """A coroutine matcher needs the async operations."""

        async def parse(text, pos):
            return None

        with pytest.raises(MatcherContractError, match="asynchronous"):
            split_cap("ab", function_matcher(parse))


class TestDerivedOperations:
    """Tests for find_all, any_till and sep_cap."""

    def test_find_all(self):
        """find_all returns match values in order."""
        assert find_all("a1b22c333", integer()) == [1, 22, 333]

    def test_find_all_none(self):
        """find_all returns an empty list without matches."""
        assert find_all("abc", integer()) == []

    def test_any_till(self):
        """any_till skips to the first match."""
        result = any_till(literal("needle")).parse("hay needle hay", 0)
        assert result == MatchResult(("hay ", "needle"), 10)

    def test_any_till_fails_without_match(self):
        """any_till fails when the inner matcher never succeeds."""
        assert any_till(literal("needle")).parse("hay", 0) is None

    def test_any_till_composes(self):
        """any_till works as a matcher inside the scan."""
        matcher = literal("<").then(any_till(literal(">"))).map(lambda p: p[1][0])
        assert find_all("<a> and <bc>", matcher) == ["a", "bc"]

    def test_sep_cap_consumes_rest(self):
        """sep_cap splits the remaining input and consumes all of it."""
        result = sep_cap(integer()).parse("x: a1b", 3)
        assert result == MatchResult(
            [LiteralSegment("a"), MatchSegment(1), LiteralSegment("b")],
            6,
        )

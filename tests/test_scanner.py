"""
Scanner Tests

Tests for MatchScanner and ScanState:
- Leftmost, non-overlapping matching
- Newest-first pair bookkeeping and slot counting
- Zero-width matches and the forced advance (carry)
- Termination for matchers that never consume
"""

from collections import deque

from streamedit.engine import MatchScanner, ScanState
from streamedit.patterns import any_char, empty, integer, literal, regex


class TestScanState:
    """Tests for ScanState bookkeeping."""

    def test_fresh_state(self):
        """A new ScanState is empty."""
        scan = ScanState()
        assert scan.pairs == deque()
        assert scan.carry is None
        assert scan.slot_count == 0
        assert scan.term == ""

    def test_record_pushes_newest_first(self):
        """record() puts the latest pair at the front."""
        scan = ScanState()
        scan.record("a", 1)
        scan.record("b", 2)
        assert list(scan.pairs) == [("b", 2), ("a", 1)]

    def test_slot_count_per_literal(self):
        """Empty literals take one slot, non-empty ones two."""
        scan = ScanState()
        scan.record("", 1)
        assert scan.slot_count == 1
        scan.record("x", 2)
        assert scan.slot_count == 3

    def test_carry_folds_into_next_literal(self):
        """A pending carry is prepended to the next recorded literal."""
        scan = ScanState(carry="z")
        scan.record("", "v")
        assert list(scan.pairs) == [("z", "v")]
        assert scan.carry is None
        assert scan.slot_count == 2

    def test_term_includes_carry(self):
        """term is carry followed by the remainder."""
        scan = ScanState(carry="a", remainder="bc")
        assert scan.term == "abc"


class TestMatchScanner:
    """Tests for the scan loop."""

    def test_finds_all_matches(self):
        """Every integer is found, in order."""
        scan = MatchScanner(integer()).scan("hay 1 straw 22 hay")
        assert list(reversed(scan.pairs)) == [("hay ", 1), (" straw ", 22)]
        assert scan.remainder == " hay"
        assert scan.carry is None

    def test_no_match_leaves_whole_input_as_remainder(self):
        """A matcher that never succeeds yields no pairs."""
        scan = MatchScanner(literal("needle")).scan("just hay")
        assert scan.match_count == 0
        assert scan.carry is None
        assert scan.remainder == "just hay"
        assert scan.slot_count == 0

    def test_empty_input(self):
        """Scanning an empty string with a failing matcher is a no-op."""
        scan = MatchScanner(any_char()).scan("")
        assert scan.match_count == 0
        assert scan.term == ""

    def test_matches_are_non_overlapping(self):
        """Scanning resumes after the end of each match."""
        scan = MatchScanner(literal("aa")).scan("aaaaa")
        assert [value for _, value in reversed(scan.pairs)] == ["aa", "aa"]
        assert scan.remainder == "a"

    def test_match_at_start_has_empty_literal(self):
        """A match at offset 0 records an empty literal and one slot."""
        scan = MatchScanner(literal("ab")).scan("abc")
        assert list(scan.pairs) == [("", "ab")]
        assert scan.slot_count == 1
        assert scan.remainder == "c"

    def test_scan_from_offset(self):
        """Scanning can start part-way into the input."""
        scan = MatchScanner(integer()).scan("1 2 3", offset=2)
        assert [value for _, value in reversed(scan.pairs)] == [2, 3]

    def test_slot_count_matches_pairs(self):
        """slot_count agrees with a recount over the pairs."""
        scan = MatchScanner(integer()).scan("1a22bb333")
        expected = sum(2 if literal_ else 1 for literal_, _ in scan.pairs)
        assert scan.slot_count == expected == 5


class TestZeroWidthRecovery:
    """Tests for zero-width matches and the forced advance."""

    def test_always_empty_matcher_terminates(self):
        """A matcher that never consumes matches once per offset, end included."""
        scan = MatchScanner(empty("*")).scan("abc")
        assert scan.match_count == 4
        assert list(reversed(scan.pairs)) == [("", "*"), ("a", "*"), ("b", "*"), ("c", "*")]
        assert scan.carry is None
        assert scan.remainder == ""

    def test_zero_width_on_empty_input(self):
        """A zero-width match at end of input stops the scan at once."""
        scan = MatchScanner(empty()).scan("")
        assert list(scan.pairs) == [("", None)]
        assert scan.zero_width == 1

    def test_carry_owed_to_remainder(self):
        """A carry with no later match ends up in term."""
        scan = MatchScanner(regex(r"(?=a)")).scan("ab")
        assert scan.match_count == 1
        assert scan.pairs[0][0] == ""
        assert scan.carry == "a"
        assert scan.remainder == "b"
        assert scan.term == "ab"

    def test_zero_width_then_consuming_match(self):
        """Carry codepoints are kept when a consuming match follows."""
        scan = MatchScanner(regex("x*").map(lambda m: m.group(0))).scan("abxd")
        assert list(reversed(scan.pairs)) == [
            ("", ""),
            ("a", ""),
            ("b", "x"),
            ("", ""),
            ("d", ""),
        ]
        assert scan.term == ""

    def test_matcher_tried_at_every_offset(self, recording_digit, call_log):
        """The matcher is tried left to right, once per offset, end included."""
        MatchScanner(recording_digit).scan("a1b")
        assert call_log == [("try", 0), ("try", 1), ("try", 2), ("try", 3)]

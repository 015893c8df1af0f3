"""Tests for decoder.loops: static loop-balance checking."""

from __future__ import annotations

import pytest

from bfvm.decoder.decoder import decode_source
from bfvm.decoder.loops import build_jump_table, check_loops, find_unmatched_loops
from bfvm.engine.errors import UnmatchedLoopBegin, UnmatchedLoopEnd


class TestFindUnmatchedLoops:
    def test_balanced(self):
        check = find_unmatched_loops(decode_source(b"+[>[-]<-]"))
        assert check.balanced
        assert check.unmatched_end is None
        assert check.unmatched_begins == ()

    def test_no_loops_is_balanced(self):
        assert find_unmatched_loops(decode_source(b"+++ comment")).balanced

    def test_open_begins_reported(self):
        check = find_unmatched_loops(decode_source(b"[+[[-]"))
        assert not check.balanced
        assert set(check.unmatched_begins) == {0, 2}

    def test_first_stray_end_reported(self):
        check = find_unmatched_loops(decode_source(b"[]]+]"))
        assert check.unmatched_end == 2

    def test_stray_end_stops_scan(self):
        check = find_unmatched_loops(decode_source(b"][["))
        assert check.unmatched_end == 0
        assert check.unmatched_begins == ()


class TestCheckLoops:
    def test_balanced_passes(self):
        check_loops(decode_source(b"++[->+<]"))

    def test_single_begin(self):
        with pytest.raises(UnmatchedLoopBegin) as exc_info:
            check_loops(decode_source(b"["))
        assert set(exc_info.value.positions) == {0}

    def test_single_end(self):
        with pytest.raises(UnmatchedLoopEnd) as exc_info:
            check_loops(decode_source(b"]"))
        assert exc_info.value.position == 0

    def test_end_takes_priority_over_open_begins(self):
        with pytest.raises(UnmatchedLoopEnd):
            check_loops(decode_source(b"[]][["))


class TestBuildJumpTable:
    def test_pairs_map_both_ways(self):
        table = build_jump_table(decode_source(b"[[]]"))
        assert table == {0: 3, 3: 0, 1: 2, 2: 1}

    def test_comments_count_as_positions(self):
        table = build_jump_table(decode_source(b"a[b]"))
        assert table == {1: 3, 3: 1}

    def test_unbalanced_raises(self):
        with pytest.raises(UnmatchedLoopBegin):
            build_jump_table(decode_source(b"[[]"))

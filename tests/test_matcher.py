"""Tests for constant-time suffix matching."""

import statistics
import time

import pytest

from passleak import CandidateEntry, Suffix, constant_time_equals, match_suffix


class CountingCandidates:
    """Iterable that records how many entries the matcher visited."""

    def __init__(self, entries):
        self.entries = entries
        self.visited = 0

    def __iter__(self):
        for entry in self.entries:
            self.visited += 1
            yield entry


def padded_candidates(size: int, match_at=None, target: bytes = b"", count: int = 7):
    candidates = [CandidateEntry(f"{i + 1:035X}".encode(), 0) for i in range(size)]
    if match_at is not None:
        candidates[match_at] = CandidateEntry(target, count)
    return candidates


class TestConstantTimeEquals:

    def test_equal(self):
        assert constant_time_equals(b"ABCDE", b"ABCDE")
        assert constant_time_equals(bytearray(b"ABCDE"), b"ABCDE")

    def test_not_equal(self):
        assert not constant_time_equals(b"ABCDE", b"ABCDF")
        assert not constant_time_equals(b"ABCDE", b"ABCD")


class TestMatchSuffix:

    def test_match_returns_count(self):
        candidates = [CandidateEntry(b"ABCDE", 3), CandidateEntry(b"FFFFF", 0)]
        assert match_suffix(b"ABCDE", candidates) == 3

    def test_no_match_returns_zero(self):
        candidates = [CandidateEntry(b"ABCDE", 3), CandidateEntry(b"FFFFF", 0)]
        assert match_suffix(b"00000", candidates) == 0

    def test_empty_candidates(self):
        assert match_suffix(b"ABCDE", []) == 0

    def test_accepts_suffix_buffer(self):
        candidates = [CandidateEntry(b"ABCDE", 3)]
        assert match_suffix(Suffix(bytearray(b"ABCDE")), candidates) == 3

    def test_length_mismatch_is_no_match(self):
        candidates = [CandidateEntry(b"ABCDE", 3)]
        assert match_suffix(b"ABCDEF", candidates) == 0

    @pytest.mark.parametrize("match_at", [0, 499, 999, None])
    def test_scans_every_entry(self, match_at):
        """No early exit: every candidate is visited wherever the match is."""
        target = b"F" * 35
        candidates = CountingCandidates(padded_candidates(1000, match_at, target))
        expected = 7 if match_at is not None else 0
        assert match_suffix(target, candidates) == expected
        assert candidates.visited == 1000

    def test_timing_independent_of_match_position(self):
        """Median scan time is the same for first, last and absent matches."""
        target = b"F" * 35
        cases = {
            "start": padded_candidates(1000, 0, target),
            "end": padded_candidates(1000, 999, target),
            "absent": padded_candidates(1000),
        }
        timings = {name: [] for name in cases}
        for _ in range(60):
            # Interleave cases so drift affects all of them equally
            for name, candidates in cases.items():
                start = time.perf_counter()
                match_suffix(target, candidates)
                timings[name].append(time.perf_counter() - start)

        medians = [statistics.median(samples) for samples in timings.values()]
        assert max(medians) / min(medians) < 1.5

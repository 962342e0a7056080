"""Tests for padding enforcement."""

import json
import logging

import pytest

from passleak import MIN_PADDING, CandidateEntry, PaddingError, enforce_padding


def entries(n: int) -> list[CandidateEntry]:
    return [CandidateEntry(f"{i:035X}".encode(), i) for i in range(n)]


class TestEnforcePadding:

    def test_minimum_is_published_floor(self):
        assert MIN_PADDING == 800

    @pytest.mark.parametrize("size", [MIN_PADDING, MIN_PADDING + 1, 1000])
    def test_padded_sets_pass_unchanged(self, size):
        candidates = entries(size)
        assert enforce_padding(candidates) is candidates

    @pytest.mark.parametrize("size", [0, 1, 2, MIN_PADDING - 1])
    def test_short_sets_fail(self, size):
        with pytest.raises(PaddingError) as exc_info:
            enforce_padding(entries(size))
        assert exc_info.value.received == size
        assert exc_info.value.minimum == MIN_PADDING

    def test_content_does_not_matter(self):
        """Even real-looking breach counts do not make a short set acceptable."""
        candidates = [CandidateEntry(b"2DC183F740EE76F27B78EB39C8AD972A757", 52579)] * 5
        with pytest.raises(PaddingError):
            enforce_padding(candidates)

    def test_custom_minimum(self):
        assert len(enforce_padding(entries(3), minimum=3)) == 3
        with pytest.raises(PaddingError):
            enforce_padding(entries(2), minimum=3)

    def test_violation_emits_security_event(self, caplog):
        with caplog.at_level(logging.INFO, logger="passleak.siem"):
            with pytest.raises(PaddingError):
                enforce_padding(entries(2))

        events = [json.loads(r.getMessage()) for r in caplog.records if r.name == "passleak.siem"]
        assert events[-1]["event_type"] == "padding_violation"
        assert events[-1]["details"] == {"received": 2, "minimum": MIN_PADDING}

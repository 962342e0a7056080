"""Shared fixtures for breach check tests."""

import hashlib
import os

import pytest

from passleak import MIN_PADDING, BreachApi, StaticCandidateFetcher


def sha1_parts(password: str) -> tuple[str, str]:
    """Reference prefix/suffix split computed with plain hashlib."""
    full = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
    return full[:5], full[5:]


def build_range_body(entries=(), padding: int = MIN_PADDING, line_ending: str = "\r\n") -> str:
    """Build a range response body padded with zero-count decoys."""
    lines = [f"{suffix}:{count}" for suffix, count in entries]
    decoys = padding - len(lines)
    lines += [f"{i:035X}:0" for i in range(1, decoys + 1)]
    return line_ending.join(lines)


def pytest_collection_modifyitems(config, items):
    """Skip live range API tests unless PASSLEAK_LIVE_TESTS=1."""
    if os.environ.get("PASSLEAK_LIVE_TESTS") == "1":
        return
    skip_network = pytest.mark.skip(reason="set PASSLEAK_LIVE_TESTS=1 to hit the live range API")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture
def hash_parts():
    return sha1_parts


@pytest.fixture
def range_body():
    return build_range_body


@pytest.fixture
def breached_password():
    return "P@ssw0rd"


@pytest.fixture
def safe_password():
    return "xK9#mL2$pQ7@nR4!"


@pytest.fixture
def range_table(breached_password, safe_password):
    """Padded ranges for one breached and one unknown password."""
    breached_prefix, breached_suffix = sha1_parts(breached_password)
    safe_prefix, _ = sha1_parts(safe_password)
    return {
        breached_prefix: build_range_body([(breached_suffix, 52579)]),
        safe_prefix: build_range_body(),
    }


@pytest.fixture
def static_fetcher(range_table):
    return StaticCandidateFetcher(range_table)


@pytest.fixture
def breach_api(static_fetcher):
    return BreachApi(static_fetcher, require_padding=True)

# File: conftest.py
# Directory: tests
# Purpose: Shared fixtures: an injectable environment mapping and a helper that
#          guarantees a key is unset in the real process environment.
#
# Notes:
# - Accessors accept any Mapping[str, str] as their source; `fake_env` is a
#   plain dict tests can mutate between reads.
# - `unset_key` uses monkeypatch so os.environ is restored after each test.

import pytest


@pytest.fixture
def fake_env():
    """Deterministic environment mapping, isolated from os.environ."""
    return {
        "DB_HOST": "db.internal",
        "FEATURE_X": "true",
        "FEATURE_Y": "false",
        "PADDED": "  spaced value  ",
        "EMPTY": "",
    }


@pytest.fixture
def unset_key(monkeypatch):
    """Return a factory that removes a key from os.environ for the test."""
    def _unset(key: str) -> str:
        monkeypatch.delenv(key, raising=False)
        return key
    return _unset

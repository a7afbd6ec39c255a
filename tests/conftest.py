"""Shared pytest fixtures."""

import time

import pytest


@pytest.fixture
def local_timezone(monkeypatch):
    """
    Switch the process's local time zone for one test.

    Returns a setter taking an IANA zone name; the original zone is
    restored on teardown.
    """
    if not hasattr(time, 'tzset'):
        pytest.skip("time.tzset is not available on this platform")

    def set_zone(name: str):
        monkeypatch.setenv('TZ', name)
        time.tzset()

    yield set_zone

    monkeypatch.undo()
    time.tzset()

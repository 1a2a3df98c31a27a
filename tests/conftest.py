"""Shared fixtures for the student picker tests."""

import sys
from pathlib import Path

import pytest

# Modules import each other by bare name, as when launched from main.py
sys.path.insert(0, str(Path(__file__).parent.parent / "student_picker"))


class ScriptedRandom:
    """randrange() stand-in that replays a fixed list of indices."""

    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        value = self.picks.pop(0)
        assert 0 <= value < n, f"scripted index {value} out of range for {n}"
        return value


@pytest.fixture
def scripted_random():
    return ScriptedRandom

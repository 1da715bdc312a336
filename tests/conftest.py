"""Shared test fixtures."""

import pytest


class ScriptedRNG:
    """Random source that replays a fixed sequence of integers."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high):
        value = self.values.pop(0)
        self.calls.append((low, high))
        assert low <= value < high, f"scripted value {value} outside [{low}, {high})"
        return value


@pytest.fixture
def scripted_rng():
    """Factory: scripted_rng(2, 0) replays 2 then 0."""
    return lambda *values: ScriptedRNG(values)

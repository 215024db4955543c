"""Pytest fixtures for tests."""

import random
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from fastcolor.random_source import ColorRandom


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng():
    """Create a seeded color generator."""
    return ColorRandom(seed=1234)


@pytest.fixture
def sample_rgb_triples():
    """A reproducible sample of RGB triples, including the extremes."""
    source = random.Random(99)
    triples = [(0, 0, 0), (255, 255, 255), (255, 0, 0), (0, 255, 0), (0, 0, 255)]
    triples += [
        (source.randint(0, 255), source.randint(0, 255), source.randint(0, 255))
        for _ in range(2000)
    ]
    return triples


class FixedSource:
    """Uniform source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_source():
    """Factory for sources returning a constant in [0, 1)."""
    return FixedSource

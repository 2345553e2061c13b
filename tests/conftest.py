import os

import pytest

from hillclimb.graph import build_adjacency
from hillclimb.grid import load_heightmap
from hillclimb.reader import read_rows

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture()
def sample_path():
    return os.path.join(DATA_DIR, "sample.txt")


@pytest.fixture()
def sample_rows(sample_path):
    return read_rows(sample_path)


@pytest.fixture()
def sample(sample_rows):
    """(hmap, start, end) for the 5x8 worked example."""
    return load_heightmap(sample_rows)


@pytest.fixture()
def sample_adj(sample):
    hmap, _, _ = sample
    return build_adjacency(hmap)


@pytest.fixture()
def walled_rows():
    # E sits among cells far below it, so nothing can climb onto it
    return ["Sbcd", "abEa"]

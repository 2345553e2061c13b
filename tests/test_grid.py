import numpy as np
import pytest

from hillclimb.errors import FormatError
from hillclimb.grid import elevation_of_char, load_heightmap
from hillclimb.models import HeightMap, Location, idx_to_rc, rc_to_idx


def test_sample_shape_and_markers(sample):
    hmap, start, end = sample
    assert hmap.shape == (5, 8)
    assert hmap.size == 40
    assert start == Location(0, 0, 0)
    assert end == Location(21, 2, 5)


def test_markers_are_normalized(sample):
    hmap, start, end = sample
    assert hmap.elevation_of(start.node) == 0
    assert hmap.elevation_of(end.node) == 25
    # "Sabqponm": b at column 2, q at column 3
    assert hmap.elevation_of(2) == 1
    assert hmap.elevation_of(3) == ord("q") - ord("a")


def test_node_ids_are_row_major(sample):
    hmap, _, _ = sample
    assert hmap.nodes[0, 0] == 0
    assert hmap.nodes[1, 0] == 8
    assert hmap.nodes[4, 7] == 39
    assert hmap.location(3, 2) == Location(26, 3, 2)
    assert hmap.locate(26) == Location(26, 3, 2)


def test_index_helpers_invert_each_other():
    W = 8
    for i in range(40):
        r, c = idx_to_rc(i, W)
        assert rc_to_idx(r, c, W) == i


def test_locate_out_of_range(sample):
    hmap, _, _ = sample
    with pytest.raises(IndexError):
        hmap.locate(40)


def test_arrays_are_read_only(sample):
    hmap, _, _ = sample
    with pytest.raises(ValueError):
        hmap.elevation[0, 0] = 3
    with pytest.raises(ValueError):
        hmap.nodes[0, 0] = 3


def test_find_targets_includes_start(sample):
    hmap, start, _ = sample
    lows = hmap.find_targets(0)
    assert len(lows) == 6
    assert lows[0] == start
    assert [loc.node for loc in lows] == sorted(loc.node for loc in lows)


def test_elevation_of_char():
    assert elevation_of_char("a") == 0
    assert elevation_of_char("z") == 25
    assert elevation_of_char("S") == 0
    assert elevation_of_char("E") == 25


@pytest.mark.parametrize("bad", ["1", "#", " ", "é"])
def test_non_letter_is_rejected(bad):
    with pytest.raises(FormatError) as exc:
        load_heightmap([f"Sa{bad}E"])
    assert exc.value.token == bad


def test_uppercase_outside_range_is_rejected():
    with pytest.raises(FormatError) as exc:
        load_heightmap(["SAbE"])
    assert exc.value.token == "A"


@pytest.mark.parametrize(
    "rows, token",
    [
        (["Sabc"], "E"),
        (["abcE"], "S"),
    ],
)
def test_missing_marker(rows, token):
    with pytest.raises(FormatError) as exc:
        load_heightmap(rows)
    assert exc.value.token == token


@pytest.mark.parametrize("rows", [["SaSE"], ["SaE", "bEc"]])
def test_repeated_marker(rows):
    with pytest.raises(FormatError):
        load_heightmap(rows)


def test_ragged_rows():
    with pytest.raises(FormatError) as exc:
        load_heightmap(["SaE", "ab"])
    assert exc.value.token == "ab"


def test_empty_grid():
    with pytest.raises(FormatError):
        load_heightmap([])


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        load_heightmap(["S?E"])


def test_elevation_dtype(sample):
    hmap, _, _ = sample
    assert hmap.elevation.dtype == np.int8
    assert hmap.elevation.min() >= 0
    assert hmap.elevation.max() <= 25


def test_heightmaps_compare_by_identity(sample_rows):
    first, _, _ = load_heightmap(sample_rows)
    second, _, _ = load_heightmap(sample_rows)
    assert first == first
    assert first != second
    assert len({first, second}) == 2
    assert isinstance(first, HeightMap)

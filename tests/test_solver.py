import pytest

from hillclimb import FormatError, HeightmapError, Solution, UnreachableError, solve


def test_sample(sample_rows):
    sol = solve(sample_rows)
    assert sol == Solution(31, 29)
    assert sol.from_start == 31
    assert sol.from_lowest == 29


def test_single_row_ladder():
    assert solve(["SbcdefghijklmnopqrstuvwxyE"]) == (25, 25)


def test_unreachable(walled_rows):
    with pytest.raises(UnreachableError) as exc:
        solve(walled_rows)
    assert exc.value.start.rc == (0, 0)
    assert exc.value.end.rc == (1, 2)
    assert "No path found" in str(exc.value)


def test_format_error_propagates():
    with pytest.raises(FormatError) as exc:
        solve(["Sa-E"])
    assert exc.value.token == "-"


def test_errors_share_base():
    assert issubclass(FormatError, HeightmapError)
    assert issubclass(UnreachableError, HeightmapError)

import pytest

from hillclimb.cli import build_parser, main


def test_solve(sample_path, capsys):
    assert main(["solve", sample_path]) == 0
    out = capsys.readouterr().out
    assert "Part one: 31" in out
    assert "Part two: 29" in out


def test_format_error_exit_code(tmp_path, capsys):
    p = tmp_path / "bad.txt"
    p.write_text("Sa.E\n")
    assert main(["solve", str(p)]) == 1
    assert "Part one" not in capsys.readouterr().out


def test_unreachable_exit_code(tmp_path, walled_rows):
    p = tmp_path / "walled.txt"
    p.write_text("\n".join(walled_rows))
    assert main(["solve", str(p)]) == 2


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["solve", str(tmp_path / "missing.txt")])


def test_parser_defaults():
    args = build_parser().parse_args(["serve"])
    assert args.port == 8081
    assert args.host == "0.0.0.0"
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_invalid_utf8_exit_code(tmp_path, capsys):
    p = tmp_path / "binary.txt"
    p.write_bytes(b"Sa\xffE\n")
    assert main(["solve", str(p)]) == 1
    assert "Part one" not in capsys.readouterr().out

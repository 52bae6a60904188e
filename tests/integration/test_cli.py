from pathlib import Path

import pytest

from identicon.cli import _build_parser, main


def test_parser_defaults() -> None:
    args = _build_parser().parse_args(["elixir"])
    assert args.inputs == ["elixir"]
    assert args.output_dir == "."
    assert args.verbose is False


def test_parser_requires_input() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args([])


def test_cli_writes_each_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["elixir", "python", "--output-dir", str(tmp_path)])
    assert status == 0
    assert (tmp_path / "elixir.png").is_file()
    assert (tmp_path / "python.png").is_file()
    out = capsys.readouterr().out.splitlines()
    assert out == [str(tmp_path / "elixir.png"), str(tmp_path / "python.png")]


def test_cli_continues_after_failure(tmp_path: Path) -> None:
    status = main(["bad/name", "elixir", "--output-dir", str(tmp_path)])
    assert status == 1
    assert (tmp_path / "elixir.png").is_file()


def test_cli_missing_output_dir(tmp_path: Path) -> None:
    assert main(["elixir", "--output-dir", str(tmp_path / "missing")]) == 1


def test_cli_undecodable_argument(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["\udcff", "--output-dir", str(tmp_path)])
    assert status == 0
    assert (tmp_path / "\udcff.png").is_file()
    assert capsys.readouterr().out.strip().endswith("\\xff.png")

from pathlib import Path

import pytest

from identicon.storage import output_path, save_image


def test_output_path() -> None:
    assert output_path("elixir") == Path("elixir.png")
    assert output_path("elixir", "avatars") == Path("avatars") / "elixir.png"
    assert output_path(b"elixir", "avatars") == Path("avatars") / "elixir.png"


def test_output_path_empty_input() -> None:
    assert output_path("", "out") == Path("out") / ".png"


def test_save_image_writes_payload(tmp_path: Path) -> None:
    path = save_image(b"payload", "elixir", tmp_path)
    assert path == tmp_path / "elixir.png"
    assert path.read_bytes() == b"payload"


def test_save_image_overwrites(tmp_path: Path) -> None:
    save_image(b"old", "elixir", tmp_path)
    path = save_image(b"new", "elixir", tmp_path)
    assert path.read_bytes() == b"new"


def test_save_image_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        save_image(b"payload", "elixir", tmp_path / "missing")


def test_save_image_input_with_path_separator(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        save_image(b"payload", "no/such/dir", tmp_path)


def test_output_path_distinct_bytes_get_distinct_names(tmp_path: Path) -> None:
    assert output_path(b"\xff", tmp_path) != output_path(b"\xfe", tmp_path)


def test_output_path_undecodable_bytes_match_escaped_str(tmp_path: Path) -> None:
    assert output_path(b"\xff", tmp_path) == output_path("\udcff", tmp_path)


def test_save_image_distinct_bytes_do_not_overwrite(tmp_path: Path) -> None:
    first = save_image(b"first", b"\xff", tmp_path)
    second = save_image(b"second", b"\xfe", tmp_path)
    assert first.read_bytes() == b"first"
    assert second.read_bytes() == b"second"

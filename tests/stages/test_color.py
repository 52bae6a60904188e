import pytest

from identicon.stages.color import pick_color
from tests.test_utils import ELIXIR_HASH, make_descriptor


def test_pick_color_first_three_bytes() -> None:
    descriptor = make_descriptor(hash_bytes=[10, 20, 30, 40, 50])
    result = pick_color(descriptor)
    assert result.color == (10, 20, 30)
    assert list(result.hash_bytes) == [10, 20, 30, 40, 50]


def test_pick_color_elixir() -> None:
    assert pick_color(make_descriptor(hash_bytes=ELIXIR_HASH)).color == (116, 181, 101)


def test_pick_color_does_not_mutate_input() -> None:
    descriptor = make_descriptor(hash_bytes=ELIXIR_HASH)
    pick_color(descriptor)
    assert descriptor.color is None


def test_pick_color_requires_hash_bytes() -> None:
    with pytest.raises(ValueError, match="hash_bytes"):
        pick_color(make_descriptor())


def test_pick_color_requires_three_bytes() -> None:
    with pytest.raises(ValueError, match="at least 3"):
        pick_color(make_descriptor(hash_bytes=[1, 2]))

"""Pytest configuration and shared fixtures."""

import pytest

from monadic import List


class ArrayLike:
    """An object that is not a sequence but converts to one."""

    def __init__(self, values):
        self.values = values

    def to_a(self):
        return list(self.values)


@pytest.fixture
def sample_list() -> List:
    """The three-element List most tests start from."""
    return List[1, 2, 3]


@pytest.fixture
def empty_list() -> List:
    """The empty List."""
    return List[()]


@pytest.fixture
def array_like() -> ArrayLike:
    """Object exposing only the array-conversion capability."""
    return ArrayLike(["a", "b", "c"])


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(content: str):
        path = tmp_path / "monadic.yaml"
        path.write_text(content)
        return path
    return _write

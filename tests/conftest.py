import pytest

from tests.fakes import BrokenSource, FixedSource


@pytest.fixture
def counting_source():
    """Words 0, 1, 2, ... so draws walk the charset in order."""
    return FixedSource(list(range(10_000)))


@pytest.fixture
def broken_source():
    return BrokenSource()

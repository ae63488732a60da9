"""Pytest configuration and fixtures."""

import pytest
import tensorlib as tl


@pytest.fixture(autouse=True)
def default_options():
    """Start every test from default options."""
    tl.config.reset_options()
    yield
    tl.config.reset_options()


@pytest.fixture
def matrix():
    """2x3 integer tensor holding 1..6."""
    return tl.Tensor([2, 3], [1, 2, 3, 4, 5, 6])


@pytest.fixture
def cube():
    """2x3x4 float tensor holding 0..23."""
    return tl.Tensor((2, 3, 4), [float(i) for i in range(24)])


@pytest.fixture(params=[(1,), (5,), (2, 3), (3, 1, 4), (2, 2, 2, 2)])
def shape(request):
    """Fixture that parametrizes over shapes of different ranks."""
    return request.param

import pytest

from poker_solver.solver import Solver


@pytest.fixture
def solver():
    return Solver()

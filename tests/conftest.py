"""Shared pytest fixtures for fibtree tests."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated unit tests")


@pytest.fixture(params=["threads", "dask"])
def strategy_name(request):
    return request.param


@pytest.fixture
def failing_calculator():
    """Build a leaf calculator that raises for one index and computes the rest."""
    from fibtree.calculator import compute

    def _factory(bad_index: int):
        def _calculator(index: int) -> int:
            if index == bad_index:
                raise ArithmeticError(f"refusing fib({index})")
            return compute(index)

        return _calculator

    return _factory


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    from fibtree.settings import BUDGET_ENV, SEQUENTIAL_THRESHOLD_ENV, STRATEGY_ENV

    for name in (BUDGET_ENV, SEQUENTIAL_THRESHOLD_ENV, STRATEGY_ENV):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

"""Result record shared by execution strategies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExecutionResult:
    """Outcome of evaluating one decomposition tree."""

    value: int
    digits: int
    tree_size: int
    tree_depth: int
    forked_units: int
    strategy_name: str
    execution_time: float

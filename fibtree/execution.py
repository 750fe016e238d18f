"""
Evaluation entry points.

``evaluate`` and ``run`` accept either a strategy name registered in
``fibtree.execution_strategy`` or an already configured strategy instance.
"""

from __future__ import annotations

from typing import Union
import logging

from fibtree.execution_strategy import ExecutionResult, ExecutionStrategy, get_strategy
from fibtree.tree import DecompositionTree

logger = logging.getLogger("fibtree.execution")

StrategyRef = Union[str, ExecutionStrategy]


def resolve_strategy(strategy: StrategyRef = "threads", sequential_threshold: int = 1) -> ExecutionStrategy:
    if isinstance(strategy, ExecutionStrategy):
        return strategy
    return get_strategy(strategy, sequential_threshold=sequential_threshold)


def evaluate(
    tree: DecompositionTree,
    strategy: StrategyRef = "threads",
    sequential_threshold: int = 1,
) -> int:
    """Evaluate a decomposition tree to the Fibonacci number it represents."""
    return resolve_strategy(strategy, sequential_threshold).evaluate(tree)


def run(
    tree: DecompositionTree,
    strategy: StrategyRef = "threads",
    sequential_threshold: int = 1,
) -> ExecutionResult:
    """Evaluate a tree and report value, digit count, shape and timing."""
    executor = resolve_strategy(strategy, sequential_threshold)
    result = executor.run(tree)
    logger.debug(
        "Evaluated tree of size %d in %.3fs (%d forked units)",
        result.tree_size,
        result.execution_time,
        result.forked_units,
    )
    return result

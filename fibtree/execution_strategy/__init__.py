"""Execution strategy implementations."""

from typing import Any

from fibtree.error_msg import ConfigurationError
from fibtree.execution_strategy.base import ExecutionStrategy
from fibtree.execution_strategy.dask import DaskExecutionStrategy
from fibtree.execution_strategy.forkjoin import ForkJoinExecutionStrategy
from fibtree.execution_strategy.results import ExecutionResult

STRATEGIES: dict[str, type[ExecutionStrategy]] = {
    ForkJoinExecutionStrategy.name: ForkJoinExecutionStrategy,
    DaskExecutionStrategy.name: DaskExecutionStrategy,
}


def get_strategy(name: str, **options: Any) -> ExecutionStrategy:
    """Instantiate the strategy registered under ``name``."""
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ConfigurationError(
            f"Unknown execution strategy '{name}' (expected one of: {known})"
        ) from None
    return strategy_cls(**options)


__all__ = [
    "DaskExecutionStrategy",
    "ExecutionResult",
    "ExecutionStrategy",
    "ForkJoinExecutionStrategy",
    "STRATEGIES",
    "get_strategy",
]

"""
fibtree - Fibonacci numbers over a parallel decomposition tree
"""

from fibtree.calculator import compute, digit_count
from fibtree.error_msg import (
    ConfigurationError,
    DomainViolation,
    EvaluationFailure,
    FibTreeException,
)
from fibtree.execution import evaluate, run
from fibtree.execution_strategy import (
    DaskExecutionStrategy,
    ExecutionResult,
    ExecutionStrategy,
    ForkJoinExecutionStrategy,
)
from fibtree.tree import (
    DecompositionTree,
    Leaf,
    Pair,
    build,
    fork_count,
    iter_leaves,
    tree_depth,
    tree_size,
)
from fibtree.version import __version__

__all__ = [
    "ConfigurationError",
    "DaskExecutionStrategy",
    "DecompositionTree",
    "DomainViolation",
    "EvaluationFailure",
    "ExecutionResult",
    "ExecutionStrategy",
    "FibTreeException",
    "ForkJoinExecutionStrategy",
    "Leaf",
    "Pair",
    "__version__",
    "build",
    "compute",
    "digit_count",
    "evaluate",
    "fork_count",
    "iter_leaves",
    "run",
    "tree_depth",
    "tree_size",
]

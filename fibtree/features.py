"""
This module defines all fibtree features using a unified registry system.
This module serves as the single source of truth for all features.
"""

from typing import (
    Dict,
    Any,
    Callable,
    Optional,
    TypeVar,
    Generic,
)
from dataclasses import dataclass
from pathlib import Path
import json
import logging
import sys

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fibtree.converters import to_dot, to_json
from fibtree.error_msg import FibTreeException
from fibtree.execution import run
from fibtree.execution_strategy import STRATEGIES
from fibtree.settings import default_budget, load_settings
from fibtree.tree import DecompositionTree, build, iter_leaves, tree_depth, tree_size

logger = logging.getLogger("fibtree.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


@dataclass
class Feature:
    """Base class for all fibtree features"""

    name: str
    description: str
    handler: Callable


class FeatureRegistry:
    """Registry for all fibtree features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


class ComputeRequest(BaseModel):
    """Validated inputs of a single computation request"""

    model_config = ConfigDict(strict=True, frozen=True)

    number: int = Field(ge=0)
    budget: int = Field(ge=0)
    strategy: str = "threads"
    sequential_threshold: int = Field(default=1, ge=1)

    @field_validator("strategy")
    @classmethod
    def _known_strategy(cls, value: str) -> str:
        if value not in STRATEGIES:
            raise ValueError(
                f"unknown strategy '{value}', expected one of: {', '.join(sorted(STRATEGIES))}"
            )
        return value


def resolve_budget(number: int, cores: int = 0) -> int:
    """Leaf budget for ``number``: explicit cores or the configured default, clamped to ``number``."""
    if cores > 0:
        return min(cores, number)
    return default_budget(number)


def to_decimal_string(value: int) -> str:
    """Render an arbitrarily large integer in base 10."""
    if hasattr(sys, "get_int_max_str_digits"):
        limit = sys.get_int_max_str_digits()
        if limit and value.bit_length() > limit * 3:
            sys.set_int_max_str_digits(0)
    return str(value)


def _save_exports(
    tree: DecompositionTree,
    save_tree_as_json: Optional[str],
    save_tree_as_dot: Optional[str],
) -> Dict[str, str]:
    saved_files: Dict[str, str] = {}
    if save_tree_as_json:
        path = Path(save_tree_as_json)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(to_json(tree), indent=2), encoding="utf-8")
        saved_files["json"] = str(path)
        logger.info("Decomposition tree saved as JSON to %s", path)
    if save_tree_as_dot:
        path = Path(save_tree_as_dot)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(to_dot(tree), encoding="utf-8")
        saved_files["dot"] = str(path)
        logger.info("Decomposition tree saved as DOT to %s", path)
    return saved_files


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from fibtree.version import get_version

    return OperationResult[Dict[str, str]](
        success=True, data={"version": get_version()}
    )


def handle_compute(
    number: int,
    cores: int = 0,
    strategy: Optional[str] = None,
    sequential_threshold: Optional[int] = None,
    quiet: bool = False,
    save_tree_as_json: Optional[str] = None,
    save_tree_as_dot: Optional[str] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Build the decomposition tree for ``number`` and evaluate it"""
    try:
        settings = load_settings().override(
            strategy=strategy, sequential_threshold=sequential_threshold
        )
        request = ComputeRequest(
            number=number,
            budget=resolve_budget(number, cores),
            strategy=settings.strategy,
            sequential_threshold=settings.sequential_threshold,
        )
    except (ValidationError, FibTreeException) as e:
        return OperationResult.fail(f"Invalid compute request: {e}")

    try:
        tree = build(request.number, request.budget)
        logger.info(
            "Calculating Fib(%d) with %d cores [tree_size=%d]",
            request.number,
            request.budget,
            tree_size(tree),
        )
        saved_files = _save_exports(tree, save_tree_as_json, save_tree_as_dot)
        result = run(
            tree,
            strategy=request.strategy,
            sequential_threshold=request.sequential_threshold,
        )
    except FibTreeException as e:
        logger.debug("Computation failed", exc_info=True)
        return OperationResult.fail(str(e))

    data: Dict[str, Any] = {
        "number": request.number,
        "budget": request.budget,
        "strategy": result.strategy_name,
        "tree_size": result.tree_size,
        "tree_depth": result.tree_depth,
        "forked_units": result.forked_units,
        "digits": result.digits,
        "execution_time": result.execution_time,
    }
    if not quiet:
        data["value"] = to_decimal_string(result.value)
    if saved_files:
        data["saved_files"] = saved_files
    return OperationResult.ok(data)


def handle_tree(
    number: int,
    cores: int = 0,
    save_tree_as_json: Optional[str] = None,
    save_tree_as_dot: Optional[str] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Build the decomposition tree for ``number`` without evaluating it"""
    try:
        budget = resolve_budget(number, cores)
        tree = build(number, budget)
        saved_files = _save_exports(tree, save_tree_as_json, save_tree_as_dot)
    except (FibTreeException, TypeError) as e:
        return OperationResult.fail(str(e))

    data: Dict[str, Any] = {
        "number": number,
        "budget": budget,
        "tree_size": tree_size(tree),
        "tree_depth": tree_depth(tree),
        "leaves": [{"path": path, "index": index} for path, index in iter_leaves(tree)],
    }
    if saved_files:
        data["saved_files"] = saved_files
    return OperationResult.ok(data)


FeatureRegistry.register(
    Feature(
        name="version",
        description="Show the fibtree version",
        handler=handle_version,
    )
)

FeatureRegistry.register(
    Feature(
        name="compute",
        description="Compute a Fibonacci number over a parallel decomposition tree",
        handler=handle_compute,
    )
)

FeatureRegistry.register(
    Feature(
        name="tree",
        description="Show the decomposition tree without evaluating it",
        handler=handle_tree,
    )
)

"""Environment-driven evaluation settings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional
import os

from fibtree.error_msg import ConfigurationError

STRATEGY_ENV = "FIBTREE_STRATEGY"
SEQUENTIAL_THRESHOLD_ENV = "FIBTREE_SEQUENTIAL_THRESHOLD"
BUDGET_ENV = "FIBTREE_BUDGET"

DEFAULT_STRATEGY = "threads"
DEFAULT_SEQUENTIAL_THRESHOLD = 1
DEFAULT_NUMBER = 400000


@dataclass(frozen=True)
class EvaluationSettings:
    """Evaluation controls shared by the CLI and the feature handlers."""

    strategy: str = DEFAULT_STRATEGY
    sequential_threshold: int = DEFAULT_SEQUENTIAL_THRESHOLD
    budget: Optional[int] = None

    def override(self, **values) -> "EvaluationSettings":
        """Return a copy with every non-None value applied."""
        return replace(self, **{key: value for key, value in values.items() if value is not None})


def _positive_int_env(name: str) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'") from None
    if value < 1:
        raise ConfigurationError(f"{name} must be >= 1, got {value}")
    return value


def load_settings() -> EvaluationSettings:
    """Resolve settings from environment variables."""
    strategy = os.environ.get(STRATEGY_ENV, "").strip().lower() or DEFAULT_STRATEGY
    threshold = _positive_int_env(SEQUENTIAL_THRESHOLD_ENV)
    return EvaluationSettings(
        strategy=strategy,
        sequential_threshold=threshold if threshold is not None else DEFAULT_SEQUENTIAL_THRESHOLD,
        budget=_positive_int_env(BUDGET_ENV),
    )


def default_budget(index: int, settings: Optional[EvaluationSettings] = None) -> int:
    """Budget used when the caller gives none: the CPU count, clamped to ``index``."""
    settings = settings or load_settings()
    budget = settings.budget if settings.budget is not None else (os.cpu_count() or 1)
    return min(budget, index)

"""
fibtree error taxonomy
"""

from typing import List, Optional, Tuple

# (identifier, position) pairs, innermost first
Stack = List[Tuple[str, str]]


class FibTreeException(Exception):
    """fibtree specific exception with decomposition trace support"""

    def __init__(self, msg: str, stack_trace: Optional[Stack] = None):
        self.msg = msg
        self.stack_trace = stack_trace or []
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if not self.stack_trace:
            return self.msg

        trace_str = ""
        for identifier, position in self.stack_trace:
            trace_str += f"\n{identifier} at {position}"

        return f"{self.msg}{trace_str}"


class DomainViolation(FibTreeException, ValueError):
    """A Fibonacci index would fall below zero"""

    def __init__(self, index: int, stack_trace: Optional[Stack] = None):
        self.index = index
        super().__init__(
            f"Fibonacci index must be non-negative, got {index}", stack_trace
        )


class EvaluationFailure(FibTreeException):
    """A forked unit failed while evaluating a decomposition tree"""

    def __init__(self, msg: str, path: str, stack_trace: Optional[Stack] = None):
        self.path = path
        super().__init__(msg, stack_trace)


class ConfigurationError(FibTreeException, ValueError):
    """Invalid configuration value"""


"""
Base-case Fibonacci calculator

Computes the nth Fibonacci number using an iterative algorithm. Every leaf of
a decomposition tree ends up here.
"""

from fibtree.error_msg import DomainViolation

# log10(2), used to estimate decimal width from bit length
_LOG10_2 = 0.30102999566398120


def _require_index(index) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(
            f"Fibonacci index must be an integer, got {type(index).__name__}"
        )
    if index < 0:
        raise DomainViolation(index)
    return index


def compute(index: int) -> int:
    """
    Compute fib(index) in the caller's thread.

    Starts from the pair (0, 1) and advances it ``index`` times, so the
    running cost is ``index`` big-integer additions with two live values.

    Args:
        index: Position in the Fibonacci sequence, ``fib(0) == 0``

    Returns:
        The Fibonacci number at ``index``

    Raises:
        DomainViolation: If ``index`` is negative
        TypeError: If ``index`` is not an integer
    """
    _require_index(index)

    a, b = 0, 1
    for _ in range(index):
        a, b = b, a + b

    return a


def digit_count(value: int) -> int:
    """Number of decimal digits in a non-negative integer.

    Works from ``int.bit_length`` so it does not depend on the interpreter's
    int-to-str conversion limit.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError("digit_count requires a non-negative integer")
    if value < 10:
        return 1

    digits = int((value.bit_length() - 1) * _LOG10_2) + 1
    # The float estimate can be off by one near powers of ten
    while digits > 1 and value < 10 ** (digits - 1):
        digits -= 1
    while value >= 10 ** digits:
        digits += 1
    return digits

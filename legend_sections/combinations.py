"""
Enumeration of split-point candidates for legend sectioning.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

Candidate = Tuple[bool, ...]


def all_comb(m: int, n: int) -> List[Candidate]:
    """Generate every length ``m`` boolean tuple with exactly ``n`` True values.

    Solutions are built bottom-up by length. The solutions of length ``m`` with
    ``n`` trues are the ``(m - 1, n - 1)`` solutions with ``True`` appended,
    followed by the ``(m - 1, n)`` solutions with ``False`` appended. The
    partitioner breaks ties in favour of later candidates, so this order is
    part of the contract.

    Args:
        m: Length of each tuple.
        n: Number of True entries in each tuple.
    Returns:
        All ``C(m, n)`` tuples, in construction order.

    Example:
        >>> all_comb(2, 1)
        [(False, True), (True, False)]
        >>> all_comb(3, 1)
        [(False, False, True), (False, True, False), (True, False, False)]
        >>> all_comb(0, 0)
        [()]
    """

    if m < 0 or n < 0 or n > m:
        raise ValueError(f"all_comb needs 0 <= n <= m, got m={m}, n={n}")
    max_true = n
    max_false = m - n
    # Only row m - 1 is needed to build row m.
    previous: Dict[int, List[Candidate]] = {0: [()]}
    for length in range(1, m + 1):
        current: Dict[int, List[Candidate]] = {}
        for trues in range(length + 1):
            if trues > max_true or length - trues > max_false:
                continue
            with_true = (
                [seq + (True,) for seq in previous[trues - 1]] if trues > 0 else []
            )
            with_false = (
                [seq + (False,) for seq in previous[trues]] if length > trues else []
            )
            current[trues] = with_true + with_false
        previous = current
    return previous[n]

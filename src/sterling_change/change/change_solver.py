from __future__ import annotations

# Minimal-count change making: bottom-up DP over every amount 0..target with a
# parallel choice table, then reconstruction of the chosen denominations.

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from sterling_change.config import get_settings

logger = logging.getLogger(__name__)

# Marks amounts that no combination of denominations reaches. Any real piece count is smaller.
UNREACHABLE = float("inf")


class InvalidDenominationsError(ValueError):
    """Raised when a denomination set cannot be used for change making."""


class NoExactChangeError(ValueError):
    """Raised when no combination of denominations sums exactly to the target."""

    def __init__(self, denominations: Sequence[int], target: int):
        self.denominations = tuple(denominations)
        self.target = target
        super().__init__(f"No combination of $denominations {list(self.denominations)} sums exactly to $target {target}")


@dataclass(frozen=True)
class ChangeSolution:
    """Outcome of one change-making run.

    Attributes:
        target (int): Amount the solution was computed for.
        pieces (tuple[int, ...]): Chosen denomination values, largest first. Empty when infeasible.
        feasible (bool): False when no exact decomposition exists.
        reason (str | None): Why the run failed; None on success.
    """

    target: int
    pieces: tuple[int, ...] = field(default_factory=tuple)
    feasible: bool = True
    reason: str | None = None

    @property
    def piece_count(self) -> int:
        """Number of pieces in the decomposition."""
        return len(self.pieces)

    def counts(self) -> dict[int, int]:
        """Map each used denomination value to how many times it is used (largest value first)."""
        return dict(Counter(self.pieces))


def validate_denominations(denominations: Sequence[int]) -> None:
    """Check that $denominations is a usable denomination set.

    Raises:
        InvalidDenominationsError: If the set is empty or holds anything but positive integers.
    """
    if isinstance(denominations, (str, bytes)) or not isinstance(denominations, Sequence):
        raise InvalidDenominationsError(f"$denominations must be a sequence of positive integers, but provided value is: {denominations!r}")

    if len(denominations) == 0:
        raise InvalidDenominationsError("$denominations must not be empty")

    for value in denominations:
        # bool is an int subclass, but True/False are not coin values
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDenominationsError(f"$denominations must contain only integers, but contains: {value!r}")
        if value <= 0:
            raise InvalidDenominationsError(f"$denominations must contain only positive values, but contains: {value}")


def validate_target(target: int, max_target: int | None = None) -> None:
    """Check that $target is a non-negative integer no larger than $max_target.

    Raises:
        ValueError: If $target is not an accepted amount.
    """
    if isinstance(target, bool) or not isinstance(target, int):
        raise ValueError(f"$target must be an integer, but provided value is: {target!r}")
    if target < 0:
        raise ValueError(f"$target must be >= 0, but provided value is: {target}")

    limit = get_settings().max_target if max_target is None else max_target
    if target > limit:
        raise ValueError(f"$target must be <= {limit} (see STERLING_CHANGE_MAX_TARGET), but provided value is: {target}")


def find_change(denominations: Sequence[int], target: int, max_target: int | None = None) -> ChangeSolution:
    """Compute the minimal-count decomposition of $target into $denominations.

    Each denomination may be used any number of times. When several decompositions
    share the minimal count, the one found first while scanning $denominations in
    the given order wins, because an entry is only replaced on a strict improvement.

    Args:
        denominations: Positive integer values. Any order; duplicates are harmless.
        target: Non-negative amount to reach exactly.
        max_target: Upper bound for $target. Defaults to the configured `max_target`.

    Returns:
        ChangeSolution: Pieces sorted from the largest value to the smallest, or an
        infeasible solution when $target cannot be reached exactly.

    Raises:
        InvalidDenominationsError: If $denominations is not a valid denomination set.
        ValueError: If $target is negative, not an integer, or above $max_target.
    """
    validate_denominations(denominations)
    validate_target(target, max_target)

    if target == 0:
        return ChangeSolution(target=0)

    coin_count = len(denominations)
    cost = [0] + [UNREACHABLE] * target
    choice = [-1] * (target + 1)

    for w in range(1, target + 1):
        for i in range(coin_count):
            d = denominations[i]
            if d <= w and cost[w - d] + 1 < cost[w]:
                cost[w] = cost[w - d] + 1
                choice[w] = i

    if cost[target] == UNREACHABLE:
        logger.warning(f"No exact change for $target {target} with $denominations {list(denominations)}")
        return ChangeSolution(target=target, feasible=False, reason=f"{target} cannot be made exactly from {list(denominations)}")

    # Walk the choice table back to 0, tallying how often each denomination was taken
    usage = [0] * coin_count
    v = target
    while v > 0:
        i = choice[v]
        usage[i] += 1
        v -= denominations[i]

    # Largest value first; stable sort keeps duplicates of equal value in scan order
    pieces: list[int] = []
    for i in sorted(range(coin_count), key=lambda idx: denominations[idx], reverse=True):
        pieces.extend([denominations[i]] * usage[i])

    logger.debug(f"Made change for $target {target} from {coin_count} denomination(s) using {len(pieces)} piece(s)")
    return ChangeSolution(target=target, pieces=tuple(pieces))


def solve(denominations: Sequence[int], target: int, max_target: int | None = None) -> list[int]:
    """Return the minimal-count decomposition of $target, largest value first.

    Examples:
        >>> solve([1, 5, 7], 20)
        [7, 7, 5, 1]
        >>> solve([1, 3, 4], 6)
        [3, 3]
        >>> solve([1, 5], 0)
        []

    Raises:
        InvalidDenominationsError: If $denominations is not a valid denomination set.
        NoExactChangeError: If no combination of $denominations sums exactly to $target.
        ValueError: If $target is negative, not an integer, or above $max_target.
    """
    solution = find_change(denominations, target, max_target)
    if not solution.feasible:
        raise NoExactChangeError(denominations, target)
    return list(solution.pieces)

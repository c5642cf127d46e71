from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from sterling_change.config import get_settings
from sterling_change.domain.monetary import denomination_registry  # noqa: F401
from sterling_change.domain.monetary.denomination import Denomination
from sterling_change.domain.monetary.denomination_system import DenominationSystem
from sterling_change.domain.monetary.price import Price

logger = logging.getLogger(__name__)


class Wallet:
    """Like a purse: a tally of coins and notes.

    Counts never go negative; removing more pieces than are held raises instead.
    """

    def __init__(self, counts: Optional[Mapping[Denomination, int]] = None):
        """Initialize a Wallet, optionally with starting counts.

        Args:
            counts (Mapping[Denomination, int] | None): Pieces held per denomination.

        Raises:
            TypeError: If a key is not a Denomination or a count is not an integer.
            ValueError: If a count is negative.
        """
        self._counts: dict[Denomination, int] = {}
        for denomination, count in (counts or {}).items():
            if not isinstance(denomination, Denomination):
                raise TypeError(f"$counts keys must be Denomination instances, but contains: {denomination!r}")
            if isinstance(count, bool) or not isinstance(count, int):
                raise TypeError(f"$counts values must be integers, but count for {denomination.name} is: {count!r}")
            if count < 0:
                raise ValueError(f"$counts values must be >= 0, but count for {denomination.name} is: {count}")
            if count:
                self._counts[denomination] = count

    @classmethod
    def from_price(cls, price: Price, system: Optional[DenominationSystem] = None) -> Wallet:
        """Build the wallet holding the fewest coins and notes worth exactly $price.

        Args:
            price (Price): Amount to make change for.
            system (DenominationSystem | None): Coins and notes to use. Defaults to the
                configured `default_system`.

        Raises:
            NoExactChangeError: If $system cannot make $price exactly.
            ValueError: If $price in halfpence exceeds the configured `max_target`.
        """
        if not isinstance(price, Price):
            raise TypeError(f"$price must be a Price instance, but provided value is: {price!r}")

        system = system or DenominationSystem.from_str(get_settings().default_system)
        wallet = cls()
        for denomination in system.make_change(price.to_halfpence()):
            wallet.add(denomination)

        logger.debug(f"Made change for {price} from system '{system.code}' using {wallet.piece_count} piece(s)")
        return wallet

    # region Tally

    def add(self, denomination: Denomination, count: int = 1) -> None:
        """Add $count coins or notes of $denomination to the wallet."""
        self._check_args(denomination, count)
        self._counts[denomination] = self._counts.get(denomination, 0) + count

    def remove(self, denomination: Denomination, count: int = 1) -> None:
        """Remove $count coins or notes of $denomination from the wallet.

        Raises:
            ValueError: If the wallet holds fewer than $count pieces of $denomination.
        """
        self._check_args(denomination, count)
        held = self._counts.get(denomination, 0)
        if count > held:
            raise ValueError(f"Cannot remove {count} x {denomination} because the wallet holds only {held}")

        if held == count:
            del self._counts[denomination]
        else:
            self._counts[denomination] = held - count

    def count(self, denomination: Denomination) -> int:
        """Number of pieces of $denomination held."""
        return self._counts.get(denomination, 0)

    @staticmethod
    def _check_args(denomination: Denomination, count: int) -> None:
        if not isinstance(denomination, Denomination):
            raise TypeError(f"$denomination must be a Denomination instance, but provided value is: {denomination!r}")
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ValueError(f"$count must be a positive integer, but provided value is: {count!r}")

    # endregion

    # region Properties

    @property
    def counts(self) -> Mapping[Denomination, int]:
        """Get held pieces per denomination (ascending by value, non-zero only)."""
        ordered = {d: self._counts[d] for d in Denomination if d in self._counts}
        return MappingProxyType(ordered)

    @property
    def piece_count(self) -> int:
        """Total number of coins and notes held."""
        return sum(self._counts.values())

    @property
    def is_empty(self) -> bool:
        return not self._counts

    def to_halfpence(self) -> int:
        """Get the halfpence value of the wallet."""
        return sum(d.halfpence * count for d, count in self._counts.items())

    def to_price(self) -> Price:
        """Get the total value of the wallet as a Price."""
        return Price.from_halfpence(self.to_halfpence())

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, Wallet):
            return False
        return self._counts == other._counts

    def __repr__(self) -> str:
        held = ", ".join(f"{d.name}={count}" for d, count in self.counts.items())
        return f"{self.__class__.__name__}({held})"

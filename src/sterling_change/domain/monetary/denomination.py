from __future__ import annotations

from enum import Enum

from sterling_change.domain.monetary.price import Price


class Denomination(Enum):
    """Coins and notes in use before decimalisation, valued in halfpence.

    The crown was legal tender but rarely seen in day-to-day use.
    """

    HALFPENNY = (1, "halfpenny")
    PENNY = (2, "penny")
    THREEPENCE = (6, "threepence")
    SIXPENCE = (12, "sixpence")
    SHILLING = (24, "shilling")
    FLORIN = (48, "florin")
    HALF_CROWN = (60, "half crown")
    CROWN = (120, "crown")
    ONE_POUND = (480, "one pound note")
    FIVE_POUND = (2400, "five pound note")
    TEN_POUND = (4800, "ten pound note")

    def __init__(self, halfpence: int, display_name: str):
        self.halfpence = halfpence
        self.display_name = display_name

    @property
    def is_note(self) -> bool:
        """True for banknotes (one pound and above)."""
        return self.halfpence >= Denomination.ONE_POUND.halfpence

    @classmethod
    def try_from_halfpence(cls, halfpence: int) -> Denomination | None:
        """Return the denomination worth $halfpence, or None if there is none."""
        for denomination in cls:
            if denomination.halfpence == halfpence:
                return denomination
        return None

    @classmethod
    def from_halfpence(cls, halfpence: int) -> Denomination:
        """Convert from halfpence value. For example, 48 gives `Denomination.FLORIN`.

        Raises:
            ValueError: If no denomination is worth $halfpence.
        """
        denomination = cls.try_from_halfpence(halfpence)
        if denomination is None:
            raise ValueError(f"No denomination is worth $halfpence {halfpence}. Known values: {[d.halfpence for d in cls]}")
        return denomination

    def to_price(self) -> Price:
        """Return the face value as a Price, e.g. HALF_CROWN -> £0 2s 6d."""
        return Price.from_halfpence(self.halfpence)

    def __str__(self) -> str:
        return self.display_name

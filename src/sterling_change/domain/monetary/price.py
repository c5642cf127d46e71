from __future__ import annotations

import re
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sterling_change.domain.monetary.denomination import Denomination

HALFPENCE_PER_PENNY = 2
HALFPENCE_PER_SHILLING = 24
SHILLINGS_PER_POUND = 20
HALFPENCE_PER_POUND = HALFPENCE_PER_SHILLING * SHILLINGS_PER_POUND

HALF_SIGN = "½"

# One slash-notation component: a '-' placeholder or digits
_WHOLE_PART = re.compile(r"^(?:-|\d+)$")
# The pence component may also carry a trailing halfpenny sign ("2½", "½")
_PENCE_PART = re.compile(r"^(?:-|\d+|\d*½)$")


class Price:
    """Represents an amount of pre-decimal British money.

    An amount is held as pounds, shillings and halfpence, always normalized so that
    $halfpence < 24 and $shillings < 20 (12 pence to the shilling, 20 shillings to the pound).
    The halfpenny is the common integer sub-unit used for all arithmetic.

    Attributes:
        pounds (int): Whole pounds.
        shillings (int): Shillings, 0-19.
        halfpence (int): Halfpence, 0-23.
    """

    def __init__(self, pounds: int = 0, shillings: int = 0, halfpence: int = 0):
        """Initialize a Price, carrying excess halfpence into shillings and shillings into pounds.

        Args:
            pounds (int): Whole pounds.
            shillings (int): Shillings (any non-negative count; 20 or more carries into pounds).
            halfpence (int): Halfpence (any non-negative count; 24 or more carries into shillings).

        Raises:
            TypeError: If a component is not an integer.
            ValueError: If a component is negative.
        """
        for name, value in (("pounds", pounds), ("shillings", shillings), ("halfpence", halfpence)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"${name} must be an integer, but provided value is: {value!r}")
            if value < 0:
                raise ValueError(f"${name} must be >= 0, but provided value is: {value}")

        total = pounds * HALFPENCE_PER_POUND + shillings * HALFPENCE_PER_SHILLING + halfpence
        self._pounds, rest = divmod(total, HALFPENCE_PER_POUND)
        self._shillings, self._halfpence = divmod(rest, HALFPENCE_PER_SHILLING)

    # region Constructors

    @classmethod
    def zero(cls) -> Price:
        """Return a Price of nothing."""
        return cls(0, 0, 0)

    @classmethod
    def from_halfpence(cls, halfpence: int) -> Price:
        """Convert a halfpence value to a Price, e.g. 490 -> £1 0s 5d."""
        return cls(0, 0, halfpence)

    @classmethod
    def from_pence(cls, pence: int) -> Price:
        """Convert a pence value to a Price. Internally calls `from_halfpence`."""
        if isinstance(pence, bool) or not isinstance(pence, int):
            raise TypeError(f"$pence must be an integer, but provided value is: {pence!r}")
        return cls.from_halfpence(pence * HALFPENCE_PER_PENNY)

    @classmethod
    def from_denomination(cls, denomination: Denomination) -> Price:
        """Return the face value of a coin or note as a Price."""
        return cls.from_halfpence(denomination.halfpence)

    @classmethod
    def from_str(cls, text: str) -> Price:
        """Parse Price from the slash notation used on pre-decimal price tags.

        Supported forms (a '-' stands for zero in any position):
        - '0' or '-/-/-' for nothing
        - 'shillings/pence', e.g. '5/2' (5s 2d), '-/6' (6d), '12/-' (12s)
        - 'pounds/shillings/pence', e.g. '1/4/-' (£1 4s 0d), '£3/16/11'
        - pence may end with '½', e.g. '2/6½' or '-/½'

        Args:
            text (str): Price in slash notation.

        Returns:
            Price: The parsed amount.

        Raises:
            ValueError: If $text is not valid slash notation.
        """
        if not isinstance(text, str):
            raise TypeError(f"$text must be a string, but provided value is: {text!r}")

        value_str = text.strip().removeprefix("£").strip()
        if not value_str:
            raise ValueError("Price string with $text = '' cannot be empty")
        if value_str == "0":
            return cls.zero()

        parts = [part.strip() for part in value_str.split("/")]
        if len(parts) == 2:
            pounds_part, (shillings_part, pence_part) = "-", parts
        elif len(parts) == 3:
            pounds_part, shillings_part, pence_part = parts
        else:
            raise ValueError(f"Price string with $text = '{text}' must be in format 'shillings/pence' or 'pounds/shillings/pence'")

        if not _WHOLE_PART.match(pounds_part) or not _WHOLE_PART.match(shillings_part):
            raise ValueError(f"Invalid pounds or shillings part in price string '{text}'; expected digits or '-'")
        if not _PENCE_PART.match(pence_part):
            raise ValueError(f"Invalid pence part '{pence_part}' in price string '{text}'; expected digits, '-' or a trailing '{HALF_SIGN}'")

        pounds = 0 if pounds_part == "-" else int(pounds_part)
        shillings = 0 if shillings_part == "-" else int(shillings_part)

        halfpenny = pence_part.endswith(HALF_SIGN)
        pence_digits = pence_part.removesuffix(HALF_SIGN)
        pence = 0 if pence_digits in ("-", "") else int(pence_digits)

        # Notation never carries: 20s is written as £1, 12d as 1s
        if shillings >= SHILLINGS_PER_POUND:
            raise ValueError(f"Shillings part in price string '{text}' must be < {SHILLINGS_PER_POUND}, but is: {shillings}")
        if pence >= HALFPENCE_PER_SHILLING // HALFPENCE_PER_PENNY:
            raise ValueError(f"Pence part in price string '{text}' must be < 12, but is: {pence}")

        return cls(pounds, shillings, pence * HALFPENCE_PER_PENNY + int(halfpenny))

    # endregion

    # region Properties

    @property
    def pounds(self) -> int:
        """Get whole pounds."""
        return self._pounds

    @property
    def shillings(self) -> int:
        """Get shillings (0-19)."""
        return self._shillings

    @property
    def halfpence(self) -> int:
        """Get halfpence (0-23)."""
        return self._halfpence

    @property
    def pence(self) -> Decimal:
        """Get pence (0-11.5)."""
        return Decimal(self._halfpence) / HALFPENCE_PER_PENNY

    @property
    def is_zero(self) -> bool:
        return self.to_halfpence() == 0

    def to_halfpence(self) -> int:
        """Convert price to halfpence value."""
        return self._pounds * HALFPENCE_PER_POUND + self._shillings * HALFPENCE_PER_SHILLING + self._halfpence

    # endregion

    # region Arithmetic

    def add(self, other: Price) -> Price:
        """Add a price to this one, carrying pence into shillings and shillings into pounds."""
        if not isinstance(other, Price):
            raise TypeError(f"$other must be a Price instance, but provided value is: {other!r}")
        return Price(self._pounds + other.pounds, self._shillings + other.shillings, self._halfpence + other.halfpence)

    def __add__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        """Right addition, so that `sum()` works with its default start value of 0.

        `sum([])` never calls this and returns 0; pass `Price.zero()` as the start value
        when the prices may be empty: `sum(prices, Price.zero())`.
        """
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        difference = self.to_halfpence() - other.to_halfpence()
        if difference < 0:
            raise ValueError(f"Cannot subtract {other} from {self} because the result would be negative")
        return Price.from_halfpence(difference)

    def __mul__(self, other):
        """Multiply Price by a whole number of items."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other < 0:
            raise ValueError(f"Cannot multiply Price by negative count {other}")
        return Price.from_halfpence(self.to_halfpence() * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    # endregion

    # region Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Price):
            return False
        return self.to_halfpence() == other.to_halfpence()

    def __lt__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.to_halfpence() < other.to_halfpence()

    def __le__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.to_halfpence() <= other.to_halfpence()

    def __gt__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.to_halfpence() > other.to_halfpence()

    def __ge__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.to_halfpence() >= other.to_halfpence()

    def __hash__(self) -> int:
        return hash(self.to_halfpence())

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '£1 4s 6½d'."""
        whole_pence, halfpenny = divmod(self._halfpence, HALFPENCE_PER_PENNY)
        pence_part = f"{whole_pence if whole_pence or not halfpenny else ''}{HALF_SIGN if halfpenny else ''}"
        return f"£{self._pounds} {self._shillings}s {pence_part}d"

    def __repr__(self) -> str:
        """Return string like 'Price(1, 4, 13)' (pounds, shillings, halfpence)."""
        return f"{self.__class__.__name__}({self._pounds}, {self._shillings}, {self._halfpence})"

    def to_slash_notation(self) -> str:
        """Return the price in slash notation, e.g. '1/4/-' or '5/2½'."""
        whole_pence, halfpenny = divmod(self._halfpence, HALFPENCE_PER_PENNY)
        if whole_pence == 0 and not halfpenny:
            pence_part = "-"
        else:
            pence_part = f"{whole_pence if whole_pence else ''}{HALF_SIGN if halfpenny else ''}"
        shillings_part = str(self._shillings) if self._shillings else "-"
        if self._pounds:
            return f"{self._pounds}/{shillings_part}/{pence_part}"
        return f"{shillings_part}/{pence_part}"

    # endregion


def price(text: str) -> Price:
    """Shorthand for `Price.from_str`, e.g. `price("5/2")`."""
    return Price.from_str(text)

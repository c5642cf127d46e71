from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Dict

from sterling_change.change.change_solver import ChangeSolution, NoExactChangeError, find_change
from sterling_change.domain.monetary.denomination import Denomination

logger = logging.getLogger(__name__)


class DenominationSystem:
    """A named set of coins and notes that change can be made from.

    The set is passed explicitly to the change solver, so any subset of the
    historical denominations can be used (e.g. coins only).

    Attributes:
        code (str): Short identifier used by the registry (e.g. "LSD").
        name (str): Human readable name.
        denominations (tuple[Denomination, ...]): Members, ascending by value.
    """

    # Class-level registry for predefined systems
    _registry: Dict[str, "DenominationSystem"] = {}

    def __init__(self, code: str, name: str, denominations: Iterable[Denomination]):
        """Initialize a DenominationSystem instance.

        Args:
            code (str): Short identifier (e.g. "LSD").
            name (str): Human readable name.
            denominations (Iterable[Denomination]): Members in any order.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If a member is not a Denomination instance.
        """
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        members = list(denominations)
        if not members:
            raise ValueError("$denominations must contain at least one Denomination")

        for member in members:
            if not isinstance(member, Denomination):
                raise TypeError(f"$denominations must contain only Denomination instances, but contains: {member!r}")

        if len(set(members)) != len(members):
            raise ValueError(f"$denominations must not contain duplicates, but provided value is: {[m.name for m in members]}")

        self._code = code.upper().strip()
        self._name = name.strip()
        self._denominations = tuple(sorted(members, key=lambda d: d.halfpence))

    @property
    def code(self) -> str:
        """Get the system code."""
        return self._code

    @property
    def name(self) -> str:
        """Get the system name."""
        return self._name

    @property
    def denominations(self) -> tuple[Denomination, ...]:
        """Get the members, ascending by value."""
        return self._denominations

    @property
    def values(self) -> list[int]:
        """Get the members' halfpence values, ascending."""
        return [d.halfpence for d in self._denominations]

    @property
    def has_unit(self) -> bool:
        """True if the system contains the halfpenny, so every amount can be made."""
        return Denomination.HALFPENNY in self._denominations

    def find_change(self, halfpence: int) -> ChangeSolution:
        """Compute the minimal-count change for $halfpence without raising on infeasibility."""
        return find_change(self.values, halfpence)

    def make_change(self, halfpence: int) -> list[Denomination]:
        """Return the fewest coins and notes worth exactly $halfpence, largest first.

        Raises:
            NoExactChangeError: If this system cannot make $halfpence exactly.
            ValueError: If $halfpence is negative or exceeds the configured `max_target`.
        """
        solution = self.find_change(halfpence)
        if not solution.feasible:
            raise NoExactChangeError(self.values, halfpence)
        return [Denomination.from_halfpence(value) for value in solution.pieces]

    @classmethod
    def register(cls, system: "DenominationSystem", overwrite: bool = False) -> None:
        """Register a system in the global registry.

        Args:
            system (DenominationSystem): The system to register.
            overwrite (bool): Whether to overwrite an existing system with the same code.

        Raises:
            ValueError: If the code already exists and overwrite is False.
            TypeError: If system is not DenominationSystem instance.
        """
        if not isinstance(system, DenominationSystem):
            raise TypeError(f"$system must be a DenominationSystem instance, but provided value is: {system}")

        if system.code in cls._registry and not overwrite:
            raise ValueError(f"DenominationSystem with code '{system.code}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[system.code] = system
        logger.debug(f"Registered DenominationSystem '{system.code}' with {len(system.denominations)} denomination(s)")

    @classmethod
    def from_str(cls, code: str) -> "DenominationSystem":
        """Get system from registry by code.

        Raises:
            ValueError: If code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            available = ", ".join(f"{s.code} ({s.name})" for s in cls._registry.values())
            raise ValueError(f"No denomination system is registered under code '{code}'. Registered systems: {available}")

        return cls._registry[code]

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenominationSystem):
            return False
        return self.code == other.code and self.denominations == other.denominations

    def __hash__(self) -> int:
        return hash((self.code, self.denominations))

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', '{self.name}', {[d.name for d in self.denominations]})"

__version__ = "0.0.1"

from sterling_change.change.change_solver import ChangeSolution, InvalidDenominationsError, NoExactChangeError, find_change, solve
from sterling_change.domain.monetary.denomination import Denomination
from sterling_change.domain.monetary.denomination_system import DenominationSystem
from sterling_change.domain.monetary.price import Price, price
from sterling_change.domain.monetary.wallet import Wallet

__all__ = [
    "ChangeSolution",
    "Denomination",
    "DenominationSystem",
    "InvalidDenominationsError",
    "NoExactChangeError",
    "Price",
    "Wallet",
    "find_change",
    "price",
    "solve",
]

from __future__ import annotations

# Tabular views of change breakdowns, for printing, CSV export or plotting.

import logging
from collections.abc import Iterable
from typing import Optional

import pandas as pd

from sterling_change.config import get_settings
from sterling_change.domain.monetary.denomination_system import DenominationSystem
from sterling_change.domain.monetary.price import Price
from sterling_change.domain.monetary.wallet import Wallet

logger = logging.getLogger(__name__)

WALLET_COLUMNS = ["denomination", "halfpence", "count", "subtotal_halfpence"]


def wallet_to_dataframe(wallet: Wallet) -> pd.DataFrame:
    """One row per denomination held, largest value first.

    Columns: denomination, halfpence, count, subtotal_halfpence.
    """
    rows = [
        {"denomination": d.display_name, "halfpence": d.halfpence, "count": count, "subtotal_halfpence": d.halfpence * count}
        for d, count in reversed(list(wallet.counts.items()))
    ]
    return pd.DataFrame(rows, columns=WALLET_COLUMNS)


def change_table(prices: Iterable[Price], system: Optional[DenominationSystem] = None) -> pd.DataFrame:
    """Make change for each of $prices and tabulate the pieces used.

    Returns one row per price with columns `price`, `halfpence`, `pieces` and one count
    column per denomination of $system (largest value first, named by display name).

    Raises:
        NoExactChangeError: If $system cannot make one of $prices exactly.
        ValueError: If one of $prices in halfpence exceeds the configured `max_target`.
    """
    system = system or DenominationSystem.from_str(get_settings().default_system)
    denominations = list(reversed(system.denominations))

    rows = []
    for p in prices:
        wallet = Wallet.from_price(p, system)
        row = {"price": str(p), "halfpence": p.to_halfpence(), "pieces": wallet.piece_count}
        row.update({d.display_name: wallet.count(d) for d in denominations})
        rows.append(row)

    columns = ["price", "halfpence", "pieces"] + [d.display_name for d in denominations]
    logger.debug(f"Built change table for {len(rows)} price(s) with system '{system.code}'")
    return pd.DataFrame(rows, columns=columns)


def prices_from_dataframe(df: pd.DataFrame, column: str = "price") -> list[Price]:
    """Parse a column of slash-notation strings (e.g. '1/4/-') into Prices.

    Raises:
        ValueError: If $df is not a DataFrame, $column is missing, or a cell is not valid notation.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}")

    if column not in df.columns:
        raise ValueError(f"The provided DataFrame is missing column '{column}'. Available columns: {list(df.columns)}")

    result = []
    for index, cell in df[column].items():
        try:
            result.append(Price.from_str(str(cell)))
        except ValueError as e:
            raise ValueError(f"Cannot parse row {index} of column '{column}': {e}") from e
    return result

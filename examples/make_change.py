from __future__ import annotations

from sterling_change.config import configure_logging, get_settings
from sterling_change.domain.monetary.denomination_registry import LSD, LSD_COINS
from sterling_change.domain.monetary.price import price
from sterling_change.domain.monetary.wallet import Wallet
from sterling_change.utils.report.change_report import change_table, wallet_to_dataframe


def run() -> None:
    configure_logging(get_settings())

    # Two items from a shop receipt
    total = price("3/16/11") + price("5/15/10")
    print(f"Total to pay: {total}")

    # Fewest coins and notes for the total
    wallet = Wallet.from_price(total, LSD)
    print(f"Change for {total} ({total.to_slash_notation()}) in {wallet.piece_count} pieces:")
    print(wallet_to_dataframe(wallet).to_string(index=False))
    print()

    # Same prices, coins only
    prices = [price("5/2"), price("1/3"), price("1/17/5"), price("2/6½")]
    print("Coins only:")
    print(change_table(prices, LSD_COINS).to_string(index=False))


if __name__ == "__main__":
    run()

import pandas as pd
import pytest

from sterling_change.change.change_solver import NoExactChangeError
from sterling_change.domain.monetary.denomination import Denomination
from sterling_change.domain.monetary.denomination_registry import LSD, LSD_COINS
from sterling_change.domain.monetary.denomination_system import DenominationSystem
from sterling_change.domain.monetary.price import price
from sterling_change.domain.monetary.wallet import Wallet
from sterling_change.utils.report.change_report import change_table, prices_from_dataframe, wallet_to_dataframe


def test_wallet_to_dataframe():
    wallet = Wallet.from_price(price("9/12/9"), LSD)
    df = wallet_to_dataframe(wallet)

    assert list(df.columns) == ["denomination", "halfpence", "count", "subtotal_halfpence"]
    assert df["denomination"].tolist() == ["five pound note", "one pound note", "crown", "half crown", "threepence"]
    assert df["count"].tolist() == [1, 4, 2, 1, 1]
    assert df["subtotal_halfpence"].sum() == price("9/12/9").to_halfpence()


def test_wallet_to_dataframe_empty_wallet():
    df = wallet_to_dataframe(Wallet())
    assert df.empty
    assert list(df.columns) == ["denomination", "halfpence", "count", "subtotal_halfpence"]


def test_change_table():
    prices = [price("5/2"), price("1/3"), price("2/6½")]
    df = change_table(prices, LSD_COINS)

    assert list(df.columns[:3]) == ["price", "halfpence", "pieces"]
    assert list(df.columns[3:]) == [d.display_name for d in reversed(LSD_COINS.denominations)]
    assert df["price"].tolist() == ["£0 5s 2d", "£0 1s 3d", "£0 2s 6½d"]
    assert df["pieces"].tolist() == [3, 2, 2]

    # 5s 2d = crown + penny + penny
    first = df.iloc[0]
    assert first["crown"] == 1
    assert first["half crown"] == 0
    assert first["penny"] == 2

    # 2s 6½d = half crown + halfpenny
    last = df.iloc[2]
    assert last["half crown"] == 1
    assert last["halfpenny"] == 1


def test_change_table_defaults_to_configured_system():
    df = change_table([price("1/-/-")])
    assert "one pound note" in df.columns
    assert df.loc[0, "one pound note"] == 1
    assert df.loc[0, "pieces"] == 1


def test_change_table_infeasible_price():
    system = DenominationSystem("SHILLINGS", "Shillings only", [Denomination.SHILLING])
    with pytest.raises(NoExactChangeError):
        change_table([price("1/-"), price("1/6")], system)


def test_prices_from_dataframe():
    df = pd.DataFrame({"item": ["tea", "bread", "coat"], "price": ["-/4", "-/9½", "3/16/11"]})
    assert prices_from_dataframe(df) == [price("-/4"), price("-/9½"), price("3/16/11")]


def test_prices_from_dataframe_custom_column_and_errors():
    df = pd.DataFrame({"cost": ["5/2", "bad"]})
    with pytest.raises(ValueError, match="missing column 'price'"):
        prices_from_dataframe(df)
    with pytest.raises(ValueError, match="Cannot parse row 1 of column 'cost'"):
        prices_from_dataframe(df, column="cost")
    with pytest.raises(ValueError, match="Expected a pandas DataFrame"):
        prices_from_dataframe([["5/2"]])


def test_change_table_price_above_limit_rejected():
    with pytest.raises(ValueError, match=r"\$target must be <= 1000000"):
        change_table([price("1/-"), price("2100/-/-")], LSD)

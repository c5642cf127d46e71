import sys

import plotly.graph_objects as go

from sterling_change.domain.monetary.denomination_registry import LSD
from sterling_change.domain.monetary.price import price
from sterling_change.domain.monetary.wallet import Wallet
from sterling_change.utils.report.change_report import wallet_to_dataframe


def breakdown_chart(text: str) -> go.Figure:
    amount = price(text)
    df = wallet_to_dataframe(Wallet.from_price(amount, LSD))

    # Create chart
    fig = (
        # One bar per coin or note used
        go.Figure(data=[go.Bar(x=df["denomination"], y=df["count"], text=df["count"])])
        # Tune chart settings
        .update_layout(
            title=f"Fewest coins and notes for {amount}",
            xaxis_title="Denomination",
            yaxis_title="Pieces",
            template="plotly_white",
        )
    )
    return fig


if __name__ == "__main__":
    breakdown_chart(sys.argv[1] if len(sys.argv) > 1 else "9/12/9").show()

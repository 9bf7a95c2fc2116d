"""Tooltip breakdown for a single (period, category) chart cell."""

from __future__ import annotations

import logging
import math
from decimal import Decimal

import pandas as pd

from sales_dashboard.aggregate.build_views import fold_sum

log = logging.getLogger(__name__)

TOOLTIP_HEADER = "Total yearly sales per categories:"
SEPARATOR = " "


def format_number(value: float) -> str:
    """Render a number the way the chart tooltips do.

    Follows JavaScript's Number-to-string rules: shortest round-trip digits,
    no trailing `.0`, plain notation for decimal exponents in [-6, 21) and
    `1e-7` / `1e+21` style otherwise, `NaN` and `Infinity` spelled out.
    """
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    parsed = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in parsed.digits)
    k = len(digits)
    n = int(parsed.exponent) + k  # position of the decimal point

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def channel_breakdown(
    df: pd.DataFrame,
    period: str,
    category: str,
    value: float,
) -> list[str]:
    """Return the tooltip lines for one chart cell.

    Selects records of `category` whose date starts with `period` (4
    characters for a year label, 7 for a `YYYY-MM` label), sums `sales` per
    marketing channel in first-encountered order and appends the grand total.

    Args:
        df: Full record frame (not the chart's filtered frame).
        period: Year or `YYYY-MM` label of the cell.
        category: Series label of the cell.
        value: The cell's own plotted value.

    Returns:
        Ordered tooltip text lines.
    """
    prefix_len = 4 if len(period) == 4 else 7
    selected = df[
        (df["product_category"] == category)
        & (df["date"].astype(str).str[:prefix_len] == period)
    ]

    by_channel: dict[str, float] = {}
    for channel, sales in zip(selected["marketing_channel"].tolist(), selected["sales"].tolist()):
        by_channel[channel] = by_channel.get(channel, 0.0) + float(sales)
    total = fold_sum(selected["sales"].tolist())
    log.debug("Tooltip %s/%s: %d records", period, category, len(selected))

    lines = [f"{category}: {format_number(value)}", SEPARATOR, TOOLTIP_HEADER]
    lines += [f"- {channel}: {format_number(amount)}" for channel, amount in by_channel.items()]
    lines += [SEPARATOR, f"Total sales for {period}: {format_number(total)}"]
    return lines

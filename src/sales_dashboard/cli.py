"""Command-line interface for inspecting dashboard views.

Provides subcommands: `views`, `tooltip` and `options`. Each command is
implemented as a `cmd_*` function that accepts an argparse namespace and
prints JSON (or plain lines) to stdout.
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import Any

import pandas as pd
from dotenv import load_dotenv

from sales_dashboard.aggregate.tooltip import channel_breakdown
from sales_dashboard.charts.views import VIEWS, build_view, filter_options
from sales_dashboard.config import get_settings
from sales_dashboard.filters.state import FilterField, FilterStore, set_field
from sales_dashboard.logging_config import configure_logging
from sales_dashboard.source.load_records import RecordStore

log = logging.getLogger(__name__)

# argparse dest -> filter field
FILTER_FLAGS: dict[str, FilterField] = {
    "start_date": FilterField.START_DATE,
    "end_date": FilterField.END_DATE,
    "year": FilterField.CHOSEN_YEAR,
    "category": FilterField.SELECTED_CATEGORY,
    "region": FilterField.REGION,
}


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _load_frame() -> pd.DataFrame:
    """Fetch the record collection from the configured source."""
    store = RecordStore.from_settings(get_settings())
    df = store.frame
    if df.empty:
        log.warning("Record collection is empty; views will be empty.")
    return df


def _store_for(view: str, args: argparse.Namespace) -> FilterStore:
    """Return a view's filter store with every CLI filter flag dispatched."""
    store = FilterStore(VIEWS[view].active_fields)
    for dest, field in FILTER_FLAGS.items():
        value = getattr(args, dest, None)
        if value:
            store.dispatch(set_field(field, value))
    return store


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


# --------------------------------------------------
# Commands
# --------------------------------------------------
def cmd_views(args: argparse.Namespace) -> None:
    """Print chart data for one view (`--view`) or all views as JSON."""
    df = _load_frame()
    names = [args.view] if args.view else list(VIEWS)

    out = {}
    for name in names:
        criteria = _store_for(name, args).criteria
        out[name] = build_view(name, df, criteria).model_dump()
    _emit(out)


def cmd_tooltip(args: argparse.Namespace) -> None:
    """Print the channel breakdown lines for one (period, category) cell."""
    df = _load_frame()
    for line in channel_breakdown(df, args.period, args.category, args.value):
        print(line)


def cmd_options(_: argparse.Namespace) -> None:
    """Print the distinct values that populate the filter controls."""
    _emit(filter_options(_load_frame()))


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="sales-dashboard")
    p.add_argument("--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_views = sub.add_parser("views")
    p_views.add_argument("--view", choices=sorted(VIEWS), default=None)
    p_views.add_argument("--start-date", default="")
    p_views.add_argument("--end-date", default="")
    p_views.add_argument("--year", default="")
    p_views.add_argument("--category", default="")
    p_views.add_argument("--region", default="")

    p_tooltip = sub.add_parser("tooltip")
    p_tooltip.add_argument("period")
    p_tooltip.add_argument("category")
    p_tooltip.add_argument("--value", type=float, default=0.0)

    sub.add_parser("options")

    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands.

    Configuration errors exit with status 2 and a one-line message.
    """
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except RuntimeError as exc:
        parser.error(str(exc))

    configure_logging(
        settings.log_path,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    if args.cmd == "views":
        cmd_views(args)
    elif args.cmd == "tooltip":
        cmd_tooltip(args)
    elif args.cmd == "options":
        cmd_options(args)
    else:
        raise SystemExit(2)


if __name__ == "__main__":
    main()

from __future__ import annotations

import pandas as pd
import streamlit as st
import altair as alt

from sales_dashboard.aggregate.tooltip import channel_breakdown
from sales_dashboard.charts.views import VIEWS, build_view, filter_options
from sales_dashboard.config import Settings, get_settings
from sales_dashboard.filters.state import FilterField, FilterStore, reset_all, set_field
from sales_dashboard.models import ChartData, ScatterData
from sales_dashboard.source.load_records import RecordStore

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="Sales Analytics", layout="wide")
st.title("📊 Sales Analytics Dashboard")

# =====================================================
# Records (fetched once, held in memory)
# =====================================================
try:
    settings = get_settings()
except RuntimeError as exc:
    st.error(str(exc))
    st.stop()


@st.cache_data(show_spinner="Loading sales records...")
def load_records(source_key: tuple[str, ...], _settings: Settings) -> pd.DataFrame:
    """Fetch the record collection once per distinct `source_key`."""
    return RecordStore.from_settings(_settings).frame


df = load_records(settings.source_key, settings)
options = filter_options(df)

if df.empty:
    st.warning("No sales records available. Check RECORD_SOURCE / SALES_DATA_LOCATION.")

# =====================================================
# Helpers
# =====================================================
CONTROL_LABELS = {
    FilterField.START_DATE: ("Starting year", "years"),
    FilterField.END_DATE: ("Ending year", "years"),
    FilterField.CHOSEN_YEAR: ("Filter by year", "years"),
    FilterField.SELECTED_CATEGORY: ("Filter by category", "categories"),
    FilterField.REGION: ("Filter by region", "regions"),
}


def view_store(name: str) -> FilterStore:
    """Return (creating on first use) the filter store owned by view `name`."""
    key = f"filters_{name}"
    if key not in st.session_state:
        st.session_state[key] = FilterStore(VIEWS[name].active_fields)
    return st.session_state[key]


def filter_controls(name: str) -> None:
    """Render one select box per active field plus a reset button."""
    store = view_store(name)
    fields = [f for f in CONTROL_LABELS if f in store.active_fields]
    if not fields:
        return

    cols = st.columns(len(fields) + 1)
    for col, field in zip(cols, fields):
        label, source = CONTROL_LABELS[field]
        choices = [""] + options[source]
        current = getattr(store.criteria, field.value)
        with col:
            picked = st.selectbox(
                label,
                choices,
                index=choices.index(current) if current in choices else 0,
                key=f"{name}_{field.value}_{current}",
            )
        if picked != current:
            store.dispatch(set_field(field, picked))
            st.rerun()

    with cols[-1]:
        if st.button("Reset filters", key=f"{name}_reset"):
            store.dispatch(reset_all())
            st.rerun()


def long_format(chart: ChartData) -> pd.DataFrame:
    """Flatten chart series into label/series/value rows for Altair."""
    rows = [
        {"label": label, "series": s.label, "value": value, "axis": s.axis or "y"}
        for s in chart.series
        for label, value in zip(chart.labels, s.values)
    ]
    return pd.DataFrame(rows, columns=["label", "series", "value", "axis"])


def color_scale(chart: ChartData) -> alt.Scale:
    return alt.Scale(
        domain=[s.label for s in chart.series],
        range=[s.color for s in chart.series],
    )


def render_series(chart: ChartData, mark: str, stacked: bool = False) -> None:
    data = long_format(chart)
    base = alt.Chart(data).encode(
        x=alt.X("label:N", sort=chart.labels, title=None),
        color=alt.Color("series:N", scale=color_scale(chart), sort=[s.label for s in chart.series]),
        tooltip=["label:N", "series:N", "value:Q"],
    )
    if mark == "bar":
        layer = base.mark_bar().encode(y=alt.Y("value:Q", stack="zero" if stacked else None, title=None))
        if not stacked:
            layer = layer.encode(xOffset=alt.XOffset("series:N"))
    else:
        primary = base.transform_filter(alt.datum.axis == "y").mark_line(point=True).encode(
            y=alt.Y("value:Q", title=None)
        )
        if (data["axis"] == "y1").any():
            secondary = base.transform_filter(alt.datum.axis == "y1").mark_line(
                point=True, strokeDash=[4, 2]
            ).encode(y=alt.Y("value:Q", title="Satisfaction / Share"))
            layer = alt.layer(primary, secondary).resolve_scale(y="independent")
        else:
            layer = primary
    st.altair_chart(layer.properties(height=360).interactive(), width="stretch")


def render_scatter(chart: ScatterData) -> None:
    data = pd.DataFrame([p.model_dump() for p in chart.points], columns=["x", "y"])
    scatter = (
        alt.Chart(data)
        .mark_circle(color=chart.color)
        .encode(
            x=alt.X("x:Q", title=chart.x_title),
            y=alt.Y("y:Q", title=chart.y_title),
        )
        .properties(height=320)
        .interactive()
    )
    st.altair_chart(scatter, width="stretch")


def tooltip_inspector(name: str, chart: ChartData) -> None:
    """Show the marketing-channel breakdown for a chosen chart cell."""
    if not chart.labels:
        return
    with st.expander("Inspect a cell"):
        c1, c2 = st.columns(2)
        with c1:
            period = st.selectbox("Period", chart.labels, key=f"{name}_period")
        with c2:
            category = st.selectbox("Category", [s.label for s in chart.series], key=f"{name}_cat")
        series = next(s for s in chart.series if s.label == category)
        value = series.values[chart.labels.index(period)]
        st.text("\n".join(channel_breakdown(df, period, category, value)))


def section(name: str, mark: str = "line", stacked: bool = False, inspect: bool = False) -> None:
    spec = VIEWS[name]
    st.header(spec.title)
    filter_controls(name)
    chart = build_view(name, df, view_store(name).criteria)
    if isinstance(chart, ScatterData):
        render_scatter(chart)
    else:
        if not chart.labels:
            st.info("No records match the current filters.")
        render_series(chart, mark, stacked)
        if inspect:
            tooltip_inspector(name, chart)
    st.divider()


# =====================================================
# Sections
# =====================================================
section("profit_by_category", inspect=True)
section("sales_vs_expenses")
section("profit_vs_employees")
section("yearly_totals")
section("region_totals", mark="bar")
section("monthly_by_category", mark="bar", stacked=True, inspect=True)
section("through_the_years")

# =====================================================
# Footer
# =====================================================
st.caption("Sales records • pandas • Streamlit • Altair")

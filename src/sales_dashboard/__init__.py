"""sales_dashboard package.

Turns a flat collection of sales transaction records into the chart-ready
views served by the Streamlit dashboard.

Architecture:
- Records are fetched once (JSON file, URL or MongoDB) and held in memory
- A per-view filter reducer decides which records feed each chart
- pandas aggregations build the grouped/summed/averaged views
- Pydantic models validate records and describe the renderer contract
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

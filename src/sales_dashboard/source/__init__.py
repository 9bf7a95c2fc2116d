"""Record source.

Fetches the raw record collection once (JSON file, http(s) URL or MongoDB),
validates it against `SalesRecord` and holds it in memory as a pandas frame.
"""

"""Aggregation helpers.

This package contains the routines that turn a (filtered) record frame into
the grouped views behind each chart, plus the tooltip breakdown computed on
demand for a single chart cell.
"""

"""Filter state and record predicates.

A single reducer drives every view's filter state; each view passes the subset
of fields it responds to. The predicate module turns that state into a
record-acceptance test.
"""

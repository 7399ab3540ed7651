"""
Utility functions module.

Relative date windows and display formatting shared by the aggregation
functions and the analytics engine.

Time Semantics:
- ``now`` is always supplied by the caller or read once from the UTC wall clock
- Calendar-date periods are compared as midnight in ``now``'s timezone
- Range lower bounds are normalized to the start of their calendar day
"""

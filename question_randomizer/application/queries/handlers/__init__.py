"""Query handlers, grouped by resource.

Queries are side-effect free: no writes and no domain events.
"""

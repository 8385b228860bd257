"""Command handlers, grouped by resource."""

"""Application layer: commands, queries, handlers, validators and dispatch."""

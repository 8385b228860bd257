"""Domain layer: entities, events and ports (protocols)."""

"""Domain event handlers (app-scoped subscribers)."""

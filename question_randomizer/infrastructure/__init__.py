"""Infrastructure adapters (persistence, events, logging, security)."""

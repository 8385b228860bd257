"""Versioned API package."""

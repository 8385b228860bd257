"""Structured logging adapters."""

from question_randomizer.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]

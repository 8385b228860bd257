"""Question Randomizer API.

Multi-tenant backend for managing quiz categories, qualifications and
questions, running randomization sessions over them, and keeping a simple
per-user conversation log.
"""

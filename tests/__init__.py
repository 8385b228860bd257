"""Test suite for the question randomizer service.

Test structure follows the test pyramid:
- unit/: Unit tests - handlers, validators and wiring with mocked ports
- integration/: Integration tests - repositories against a real database
- api/: API endpoint tests - HTTP requests through the FastAPI application

Database-backed tests run against in-memory SQLite (aiosqlite), so the
suite needs no external services.
"""

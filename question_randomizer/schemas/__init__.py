"""Pydantic request/response schemas for the HTTP API.

Request schemas only describe the JSON shape. Field rules (required,
lengths, batch limits) are enforced by the command validators so that
violations come back as 400 with an ``errors[]`` list.
"""

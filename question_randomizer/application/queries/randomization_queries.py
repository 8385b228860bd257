"""Randomization queries."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetRandomization:
    """Fetch the acting user's current (active) session, if any."""


@dataclass(frozen=True, kw_only=True)
class GetSelectedCategories:
    """List the selected categories of an owned session."""

    randomization_id: str


@dataclass(frozen=True, kw_only=True)
class GetUsedQuestions:
    """List the used questions of an owned session."""

    randomization_id: str


@dataclass(frozen=True, kw_only=True)
class GetPostponedQuestions:
    """List the postponed questions of an owned session."""

    randomization_id: str

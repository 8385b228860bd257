"""Category and qualification queries.

Queries never change state. ``is_active`` filters are optional: None
returns active and soft-deleted records alike.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetCategories:
    """List the acting user's categories."""

    is_active: bool | None = None


@dataclass(frozen=True, kw_only=True)
class GetCategoryById:
    """Fetch one owned category."""

    category_id: str


@dataclass(frozen=True, kw_only=True)
class GetQualifications:
    """List the acting user's qualifications."""

    is_active: bool | None = None


@dataclass(frozen=True, kw_only=True)
class GetQualificationById:
    """Fetch one owned qualification."""

    qualification_id: str

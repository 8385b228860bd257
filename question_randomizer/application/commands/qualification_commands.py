"""Qualification commands (same shapes as category commands)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateQualification:
    """Create one qualification."""

    name: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreateQualificationsBatch:
    """Create up to 100 qualifications atomically from a list of names."""

    names: list[str]


@dataclass(frozen=True, kw_only=True)
class UpdateQualification:
    """Overwrite an owned qualification."""

    qualification_id: str
    name: str
    description: str | None = None
    is_active: bool = True


@dataclass(frozen=True, kw_only=True)
class DeleteQualification:
    """Soft-delete an owned qualification and notify dependants."""

    qualification_id: str

"""Qualification domain entity.

Mirrors Category: a user-owned label that questions may reference, soft
deleted via ``is_active``.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(kw_only=True)
class Qualification:
    """Qualification owned by a single user.

    Attributes:
        id: Store-assigned identifier (None until persisted).
        name: Display name.
        description: Optional free text.
        is_active: False once soft-deleted.
        user_id: Owning user.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    id: str | None = None
    name: str
    description: str | None = None
    is_active: bool = True
    user_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

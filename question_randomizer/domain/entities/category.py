"""Category domain entity.

A user-owned grouping for questions. Names are unique by convention only.
Deleting a category is a soft delete (``is_active=False``) and raises
CategoryDeletedEvent so questions drop their reference to it.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(kw_only=True)
class Category:
    """Question category owned by a single user.

    Attributes:
        id: Store-assigned identifier (None until persisted).
        name: Display name.
        description: Optional free text.
        is_active: False once soft-deleted.
        user_id: Owning user, immutable after creation.
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

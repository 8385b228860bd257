"""SQLAlchemy persistence: engine/session management, models, repositories."""

from question_randomizer.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)
from question_randomizer.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]

"""Core enums package.

Usage:
    from question_randomizer.core.enums import ErrorCode, Environment
"""

from question_randomizer.core.enums.environment import Environment
from question_randomizer.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]

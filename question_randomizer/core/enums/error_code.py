"""Machine-readable error codes carried by DomainError.

Codes are grouped by the category of failure the HTTP edge maps them to:
validation (400), authentication (401) and not found (404).
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    # Validation
    VALIDATION_FAILED = "validation_failed"

    # Authentication
    AUTHENTICATION_REQUIRED = "authentication_required"
    INVALID_TOKEN = "invalid_token"

    # Not found (also used when the record belongs to another user)
    CATEGORY_NOT_FOUND = "category_not_found"
    QUALIFICATION_NOT_FOUND = "qualification_not_found"
    QUESTION_NOT_FOUND = "question_not_found"
    CONVERSATION_NOT_FOUND = "conversation_not_found"
    RANDOMIZATION_NOT_FOUND = "randomization_not_found"
    SELECTED_CATEGORY_NOT_FOUND = "selected_category_not_found"
    USED_QUESTION_NOT_FOUND = "used_question_not_found"
    POSTPONED_QUESTION_NOT_FOUND = "postponed_question_not_found"

"""Validators for conversation and message commands."""

from question_randomizer.application.validators.rules import Validator
from question_randomizer.domain.entities.conversation import MessageRole

MAX_TITLE_LENGTH = 200
MAX_CONTENT_LENGTH = 10000


class CreateConversationValidator(Validator):
    def define(self) -> None:
        self.rule_for("title").not_empty(
            "Conversation title is required"
        ).max_length(MAX_TITLE_LENGTH, "Title must not exceed 200 characters")


class AddMessageValidator(Validator):
    def define(self) -> None:
        self.rule_for("conversation_id").not_empty("Conversation ID is required")
        self.rule_for("role").not_empty("Role is required").one_of(
            frozenset(role.value for role in MessageRole),
            "Role must be 'user' or 'assistant'",
        )
        self.rule_for("content").not_empty("Message content is required").max_length(
            MAX_CONTENT_LENGTH, "Content must not exceed 10000 characters"
        )

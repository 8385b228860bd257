"""Validators for randomization session commands.

``status`` is free-form: only presence is enforced.
"""

from question_randomizer.application.validators.rules import Validator

MAX_CATEGORY_NAME_LENGTH = 200


class UpdateRandomizationValidator(Validator):
    def define(self) -> None:
        self.rule_for("randomization_id").not_empty("Randomization ID is required")
        self.rule_for("status").not_empty("Status is required")


class AddSelectedCategoryValidator(Validator):
    def define(self) -> None:
        self.rule_for("randomization_id").not_empty("Randomization ID is required")
        self.rule_for("category_id").not_empty("Category ID is required")
        self.rule_for("category_name").not_empty(
            "Category name is required"
        ).max_length(
            MAX_CATEGORY_NAME_LENGTH, "Category name must not exceed 200 characters"
        )


class AddUsedQuestionValidator(Validator):
    def define(self) -> None:
        self.rule_for("randomization_id").not_empty("Randomization ID is required")
        self.rule_for("question_id").not_empty("Question ID is required")
        self.rule_for("category_name").max_length(
            MAX_CATEGORY_NAME_LENGTH, "Category name must not exceed 200 characters"
        ).when(lambda command: command.category_name is not None)


class UpdateUsedQuestionCategoryValidator(Validator):
    def define(self) -> None:
        self.rule_for("randomization_id").not_empty("Randomization ID is required")
        self.rule_for("category_id").not_empty("Category ID is required")
        self.rule_for("category_name").not_empty(
            "Category name is required"
        ).max_length(
            MAX_CATEGORY_NAME_LENGTH, "Category name must not exceed 200 characters"
        )


class AddPostponedQuestionValidator(Validator):
    def define(self) -> None:
        self.rule_for("randomization_id").not_empty("Randomization ID is required")
        self.rule_for("question_id").not_empty("Question ID is required")

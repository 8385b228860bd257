"""Validators for category and qualification commands.

Both resources share the same field rules; only the wording differs.
"""

from question_randomizer.application.validators.rules import Validator

MAX_NAME_LENGTH = 100
MAX_BATCH_SIZE = 100


class CreateCategoryValidator(Validator):
    def define(self) -> None:
        self.rule_for("name").not_empty("Category name is required").max_length(
            MAX_NAME_LENGTH, "Category name must not exceed 100 characters"
        )


class CreateCategoriesBatchValidator(Validator):
    def define(self) -> None:
        self.rule_for("names").not_empty(
            "At least one category name is required"
        ).max_count(
            MAX_BATCH_SIZE, "Maximum 100 categories can be created at once"
        ).each(
            lambda name: name.not_empty("Category name cannot be empty").max_length(
                MAX_NAME_LENGTH, "Category name must not exceed 100 characters"
            )
        )


class UpdateCategoryValidator(Validator):
    def define(self) -> None:
        self.rule_for("category_id").not_empty("Category ID is required")
        self.rule_for("name").not_empty("Category name is required").max_length(
            MAX_NAME_LENGTH, "Category name must not exceed 100 characters"
        )


class CreateQualificationValidator(Validator):
    def define(self) -> None:
        self.rule_for("name").not_empty("Qualification name is required").max_length(
            MAX_NAME_LENGTH, "Qualification name must not exceed 100 characters"
        )


class CreateQualificationsBatchValidator(Validator):
    def define(self) -> None:
        self.rule_for("names").not_empty(
            "At least one qualification name is required"
        ).max_count(
            MAX_BATCH_SIZE, "Maximum 100 qualifications can be created at once"
        ).each(
            lambda name: name.not_empty(
                "Qualification name cannot be empty"
            ).max_length(
                MAX_NAME_LENGTH, "Qualification name must not exceed 100 characters"
            )
        )


class UpdateQualificationValidator(Validator):
    def define(self) -> None:
        self.rule_for("qualification_id").not_empty("Qualification ID is required")
        self.rule_for("name").not_empty("Qualification name is required").max_length(
            MAX_NAME_LENGTH, "Qualification name must not exceed 100 characters"
        )

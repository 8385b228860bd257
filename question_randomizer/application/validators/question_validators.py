"""Validators for question commands.

``QuestionInputValidator`` carries the field rules shared by single and
batch writes. Batch validators run it on every element, so a violation in
the third question is reported as ``questions[2].answer``.
"""

from question_randomizer.application.validators.rules import Validator

MAX_QUESTION_TEXT_LENGTH = 1000
MAX_ANSWER_LENGTH = 5000
MAX_REFERENCE_LENGTH = 100
MAX_TAGS = 20
MAX_BATCH_SIZE = 100


class QuestionInputValidator(Validator):
    """Field rules for one question payload."""

    def define(self) -> None:
        self.rule_for("question_text").not_empty(
            "Question text is required"
        ).max_length(
            MAX_QUESTION_TEXT_LENGTH, "Question text must not exceed 1000 characters"
        )
        self.rule_for("answer").not_empty("Answer is required").max_length(
            MAX_ANSWER_LENGTH, "Answer must not exceed 5000 characters"
        )
        self.rule_for("answer_pl").not_empty("Polish answer is required").max_length(
            MAX_ANSWER_LENGTH, "Polish answer must not exceed 5000 characters"
        )
        # Optional references are only checked when supplied.
        self.rule_for("category_id").max_length(
            MAX_REFERENCE_LENGTH, "Category ID must not exceed 100 characters"
        ).when(lambda question: bool(question.category_id))
        self.rule_for("qualification_id").max_length(
            MAX_REFERENCE_LENGTH, "Qualification ID must not exceed 100 characters"
        ).when(lambda question: bool(question.qualification_id))
        self.rule_for("tags").max_count(MAX_TAGS, "Maximum 20 tags allowed").when(
            lambda question: question.tags is not None
        )


class QuestionUpdateInputValidator(QuestionInputValidator):
    """Field rules for one question payload that targets an existing row."""

    def define(self) -> None:
        self.rule_for("question_id").not_empty("Question ID is required")
        super().define()


class CreateQuestionValidator(QuestionInputValidator):
    pass


class UpdateQuestionValidator(QuestionUpdateInputValidator):
    pass


class CreateQuestionsBatchValidator(Validator):
    def define(self) -> None:
        self.rule_for("questions").not_empty(
            "At least one question is required"
        ).max_count(
            MAX_BATCH_SIZE, "Maximum 100 questions can be created at once"
        ).each_child(QuestionInputValidator())


class UpdateQuestionsBatchValidator(Validator):
    def define(self) -> None:
        self.rule_for("questions").not_empty(
            "At least one question is required"
        ).max_count(
            MAX_BATCH_SIZE, "Maximum 100 questions can be updated at once"
        ).each_child(QuestionUpdateInputValidator())


class RemoveCategoryFromQuestionsValidator(Validator):
    def define(self) -> None:
        self.rule_for("category_id").not_empty("Category ID is required")


class RemoveQualificationFromQuestionsValidator(Validator):
    def define(self) -> None:
        self.rule_for("qualification_id").not_empty("Qualification ID is required")

"""
RequiredFieldValidator - ensures a field resolves to non-blank text.
"""

from csvloader.core.parsing import Empty, Leaf, Node, Record, TreeValue

from .base_validator import BaseValidator, ValidationError


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present and holds text.

    Fails if:
    - Field path is missing from the record
    - Field resolves to a nested mapping instead of a value
    - Field value is blank after trimming
    """

    def validate(self, value: TreeValue, record: Record) -> None:
        if isinstance(value, Empty):
            raise ValidationError(
                rule_name="required_field",
                field_name=self.field_name,
                message="Field is missing from record"
            )

        if isinstance(value, Node):
            raise ValidationError(
                rule_name="required_field",
                field_name=self.field_name,
                message="Field holds a nested mapping, expected a value"
            )

        if isinstance(value, Leaf) and not value.value.strip():
            raise ValidationError(
                rule_name="required_field",
                field_name=self.field_name,
                message="Field value is empty string"
            )

    @property
    def rule_type(self) -> str:
        return "required_field"

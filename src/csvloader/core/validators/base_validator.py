"""
Base validator interface for record field rules.

All validators inherit from BaseValidator and implement validate().
Field values are resolved from the nested record before validation, so
validators receive an Empty, Leaf or Node value.
"""

from abc import ABC, abstractmethod

from csvloader.core.parsing import Record, TreeValue


class ValidationError(Exception):
    """Raised when a validation rule fails."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator checks one dot-path field of a record.
    """

    def __init__(self, field_name: str):
        """
        Initialize validator.

        Args:
            field_name: Dot-path of the field to validate (e.g. "name.firstName")
        """
        self.field_name = field_name

    @abstractmethod
    def validate(self, value: TreeValue, record: Record) -> None:
        """
        Validate a resolved field value.

        Args:
            value: The field value resolved from the record
            record: The entire record (for context-dependent validation)

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name})"

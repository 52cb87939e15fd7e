"""
IntegerValidator - validates and parses base-10 integer fields.
"""

import json
import re

from csvloader.core.parsing import Leaf, Node, Record, TreeValue

from .base_validator import BaseValidator, ValidationError

# Optional sign followed by ASCII digits; anything after the digits is ignored
LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")

# Longer digit runs are clamped; they are far outside any storable age
MAX_DIGITS = 20


def parse_leading_int(text: str) -> int | None:
    """
    Parse the leading base-10 integer of a string.

    Trailing non-numeric characters are tolerated ("35 years" -> 35).
    Digit runs longer than MAX_DIGITS (after leading zeros) parse to
    +/-10**MAX_DIGITS, which the store rejects as out of range.

    Returns:
        The integer, or None if the trimmed text does not start with one
    """
    match = LEADING_INTEGER.match(text.strip())
    if not match:
        return None
    token = match.group(0)
    sign = -1 if token[0] == "-" else 1
    digits = token.lstrip("+-").lstrip("0") or "0"
    if len(digits) > MAX_DIGITS:
        return sign * 10 ** MAX_DIGITS
    return sign * int(digits)


def raw_text(value: TreeValue) -> str:
    """Render a resolved value the way it appeared in the source row."""
    if isinstance(value, Leaf):
        return value.value
    if isinstance(value, Node):
        return json.dumps(value.children, ensure_ascii=False)
    return ""


class IntegerValidator(BaseValidator):
    """
    Validates that a field starts with a base-10 integer.

    Only leaf values can pass; a missing field or a nested mapping fails.
    """

    def validate(self, value: TreeValue, record: Record) -> None:
        self.parse(value)

    def parse(self, value: TreeValue) -> int:
        """
        Parse the field value as an integer.

        Raises:
            ValidationError: If the value has no leading integer
        """
        parsed = parse_leading_int(value.value) if isinstance(value, Leaf) else None
        if parsed is None:
            raise ValidationError(
                rule_name="integer",
                field_name=self.field_name,
                message=f"Cannot parse {raw_text(value)!r} as integer"
            )
        return parsed

    @property
    def rule_type(self) -> str:
        return "integer"

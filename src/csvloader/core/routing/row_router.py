"""
Row router: validates a nested record and splits it into destination columns.

Mandatory fields are ``name.firstName``, ``name.lastName`` and ``age``.
The ``address`` subtree gets its own column; everything else except
``name`` and ``age`` goes to ``additional``.
"""

from csvloader.core.models import SkipReason, ValidatedRow
from csvloader.core.parsing import Node, Record, lookup
from csvloader.core.validators import (
    IntegerValidator,
    RequiredFieldValidator,
    ValidationError,
    raw_text,
)

FIRST_NAME_FIELD = "name.firstName"
LAST_NAME_FIELD = "name.lastName"
AGE_FIELD = "age"
ADDRESS_FIELD = "address"

# Top-level keys that never end up in the additional column
ROUTED_KEYS = ("name", "age")

MISSING_NAME_REASON = "Missing name.firstName or name.lastName"


class RowRouter:
    """
    Validates records and routes their fields.

    Pure: routing a record has no side effects and does not mutate it.
    """

    def __init__(self, strip_address_from_additional: bool = False):
        """
        Initialize router.

        Args:
            strip_address_from_additional: Also drop the top-level ``address`` key
                from the additional column (it is always written to its own column)
        """
        self.strip_address_from_additional = strip_address_from_additional
        self.name_validators = [
            RequiredFieldValidator(FIRST_NAME_FIELD),
            RequiredFieldValidator(LAST_NAME_FIELD),
        ]
        self.age_validator = IntegerValidator(AGE_FIELD)

    def route(self, record: Record, ordinal: int) -> ValidatedRow | SkipReason:
        """
        Validate one record.

        Args:
            record: Nested record built from a data row
            ordinal: 1-based position of the record among parsed rows

        Returns:
            ValidatedRow on success, SkipReason otherwise
        """
        try:
            for validator in self.name_validators:
                validator.validate(lookup(record, validator.field_name), record)
        except ValidationError:
            return SkipReason(line_index=ordinal, reason=MISSING_NAME_REASON)

        age_value = lookup(record, AGE_FIELD)
        try:
            age = self.age_validator.parse(age_value)
        except ValidationError:
            return SkipReason(
                line_index=ordinal,
                reason=f'Invalid age: "{raw_text(age_value)}"'
            )

        return ValidatedRow(
            name=self._full_name(record),
            age=age,
            address=self._address(record),
            additional=self._additional(record),
        )

    @staticmethod
    def _full_name(record: Record) -> str:
        first = raw_text(lookup(record, FIRST_NAME_FIELD)).strip()
        last = raw_text(lookup(record, LAST_NAME_FIELD)).strip()
        return f"{first} {last}"

    @staticmethod
    def _address(record: Record) -> dict:
        address = lookup(record, ADDRESS_FIELD)
        if isinstance(address, Node):
            return dict(address.children)
        return {}

    def _additional(self, record: Record) -> dict:
        excluded = ROUTED_KEYS
        if self.strip_address_from_additional:
            excluded = ROUTED_KEYS + (ADDRESS_FIELD,)
        return {key: value for key, value in record.items() if key not in excluded}

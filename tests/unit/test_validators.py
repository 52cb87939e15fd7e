"""
Unit tests for field validators.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from csvloader.core.parsing import Empty, Leaf, Node
from csvloader.core.validators import (
    IntegerValidator,
    RequiredFieldValidator,
    ValidationError,
    parse_leading_int,
)


@pytest.mark.unit
class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    def test_valid_required_field(self):
        validator = RequiredFieldValidator("name.firstName")
        validator.validate(Leaf("Rohit"), {})  # Should not raise

    def test_missing_field_raises_error(self):
        validator = RequiredFieldValidator("name.firstName")

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(Empty(), {})

        assert "missing" in str(exc_info.value).lower()
        assert exc_info.value.field_name == "name.firstName"
        assert exc_info.value.rule_name == "required_field"

    def test_whitespace_raises_error(self):
        validator = RequiredFieldValidator("name.lastName")

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(Leaf("   "), {})

        assert "empty" in str(exc_info.value).lower()

    def test_nested_mapping_raises_error(self):
        validator = RequiredFieldValidator("name.firstName")

        with pytest.raises(ValidationError):
            validator.validate(Node({"first": "Rohit"}), {})

    @given(st.text(min_size=1).filter(lambda s: s.strip() != ""))
    def test_property_any_nonblank_string_passes(self, value):
        """Property test: any non-blank string should pass"""
        RequiredFieldValidator("field").validate(Leaf(value), {})


@pytest.mark.unit
class TestIntegerValidator:
    """Tests for IntegerValidator"""

    def test_parse_integer(self):
        assert IntegerValidator("age").parse(Leaf("35")) == 35

    def test_validate_passes(self):
        IntegerValidator("age").validate(Leaf(" 35 "), {})  # Should not raise

    def test_invalid_raises_error(self):
        with pytest.raises(ValidationError) as exc_info:
            IntegerValidator("age").parse(Leaf("abc"))

        assert exc_info.value.rule_name == "integer"
        assert "abc" in exc_info.value.message

    def test_missing_raises_error(self):
        with pytest.raises(ValidationError):
            IntegerValidator("age").parse(Empty())

    def test_node_raises_error(self):
        with pytest.raises(ValidationError):
            IntegerValidator("age").parse(Node({"years": "35"}))

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("9" * 5000, 10 ** 20),
            ("-" + "9" * 5000, -(10 ** 20)),
            ("0" * 5000 + "35", 35),
            ("-0", 0),
        ],
    )
    def test_parse_long_digit_runs(self, text, expected):
        assert parse_leading_int(text) == expected

    def test_repr(self):
        assert repr(IntegerValidator("age")) == "IntegerValidator(field=age)"

    def test_rule_type(self):
        assert IntegerValidator("age").rule_type == "integer"
        assert RequiredFieldValidator("age").rule_type == "required_field"

    @given(st.integers(min_value=-10**12, max_value=10**12), st.text(alphabet="abc xyz.%", max_size=5))
    def test_property_leading_integer_parsed(self, number, suffix):
        """Property test: any integer followed by non-digit junk parses to itself"""
        assert parse_leading_int(f"  {number}{suffix}") == number

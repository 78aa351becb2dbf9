"""Unit tests for the 422 details contract checks."""

from types import SimpleNamespace

import pytest

from rest_errors.shared.errors import (
    DetailCode,
    ErrorDetail,
    InvariantError,
    invariant,
    is_blank,
    validate_details,
)
from rest_errors.shared.errors.validation import MISSING, find_detail_violations, read_attr
from rest_errors.tests.factories import login_detail


class TestIsBlank:
    """Tests for is_blank."""

    @pytest.mark.parametrize("value", [None, "", MISSING])
    def test_blank_values(self, value):
        """Test values treated as unset."""
        assert is_blank(value) is True

    @pytest.mark.parametrize("value", [" ", "message", 0, False, []])
    def test_present_values(self, value):
        """Test falsy values other than None and "" are not blank."""
        assert is_blank(value) is False


class TestReadAttr:
    """Tests for read_attr."""

    def test_reads_attribute(self):
        """Test attribute access on objects."""
        assert read_attr(SimpleNamespace(field="email"), "field") == "email"

    def test_reads_mapping_key(self):
        """Test key access on mappings."""
        assert read_attr({"field": "email"}, "field") == "email"

    def test_first_present_name_wins(self):
        """Test alias lookup order."""
        source = {"fieldMessage": "camel", "field_message": "snake"}
        assert read_attr(source, "field_message", "fieldMessage") == "snake"

    def test_missing(self):
        """Test the MISSING marker for absent names."""
        assert read_attr({}, "field") is MISSING
        assert read_attr(SimpleNamespace(), "field") is MISSING

    def test_none_is_present(self):
        """Test that an explicit None is returned as is."""
        assert read_attr({"field": None}, "field") is None


class TestInvariant:
    """Tests for invariant."""

    def test_passes(self):
        """Test a true condition does nothing."""
        invariant(True, "never raised")

    def test_raises(self):
        """Test a false condition raises with the message."""
        with pytest.raises(InvariantError, match="boom"):
            invariant(False, "boom")


class TestValidateDetails:
    """Tests for validate_details."""

    def test_valid_mapping_entries(self):
        """Test well-formed mapping entries pass."""
        validate_details([login_detail(code) for code in ("already_exists", "invalid", "missing")])

    def test_valid_model_entries(self):
        """Test ErrorDetail entries pass."""
        validate_details([ErrorDetail(code=DetailCode.MISSING, field="deck_id", resource="Card")])

    def test_valid_object_entries(self):
        """Test plain objects with attributes pass."""
        validate_details([SimpleNamespace(code="missing_field", field="name", resource="Deck")])

    def test_empty(self):
        """Test empty details are rejected."""
        with pytest.raises(InvariantError, match="Error details must be defined."):
            validate_details([])

    def test_not_a_sequence(self):
        """Test scalar details are rejected."""
        with pytest.raises(InvariantError, match="must be a sequence"):
            validate_details("invalid")

    @pytest.mark.parametrize("name", ["code", "field", "resource"])
    def test_missing_attribute(self, name):
        """Test each required attribute is checked."""
        entry = login_detail()
        del entry[name]

        with pytest.raises(InvariantError, match=f"Error details.{name} is missing."):
            validate_details([entry])

    @pytest.mark.parametrize("name", ["code", "field", "resource"])
    def test_blank_attribute(self, name):
        """Test empty strings count as missing."""
        with pytest.raises(InvariantError, match=f"Error details.{name} is missing."):
            validate_details([login_detail(**{name: ""})])

    def test_unknown_code(self):
        """Test codes outside the enumeration are rejected."""
        with pytest.raises(InvariantError) as exc_info:
            validate_details([login_detail(), login_detail("duplicate")])

        assert str(exc_info.value) == (
            "Received details.code: duplicate. "
            "It must be one of ['already_exists', 'invalid', 'missing', 'missing_field']."
        )


class TestFindDetailViolations:
    """Tests for find_detail_violations."""

    def test_no_violations(self):
        """Test well-formed details report nothing."""
        assert find_detail_violations([login_detail()]) == []

    def test_collects_all(self):
        """Test every violation is reported, in entry order."""
        violations = find_detail_violations([{"code": "nope"}, login_detail(resource=None)])

        assert violations == [
            "Error details.field is missing.",
            "Error details.resource is missing.",
            "Received details.code: nope. "
            "It must be one of ['already_exists', 'invalid', 'missing', 'missing_field'].",
            "Error details.resource is missing.",
        ]

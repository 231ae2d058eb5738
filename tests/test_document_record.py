"""
Unit tests for building document and registration records.
"""

import pytest

from conftest import make_payload, make_registration
from src.core.entities.document import DocumentRecord
from src.core.exceptions import BadRequestError, ReconciliationError


class TestDocumentFromPayload:
    """Tests for DocumentRecord.from_payload."""

    def test_reads_provider_fields(self):
        """Test every field is read from its payload path."""
        record = DocumentRecord.from_payload(make_payload())
        assert record == DocumentRecord(
            first_name="John",
            last_name="Smith",
            date_of_birth="1990-01-01",
            postal_code="SW1A 2AA",
            address_line="10 Downing Street",
            city="London",
            doc_type="DRIVING_LICENSE",
            issuing_country="GBR",
        )

    def test_missing_sections_become_empty(self):
        """Test absent document/address sections degrade to empty strings."""
        record = DocumentRecord.from_payload({"transaction": {"status": "DONE"}})
        assert record == DocumentRecord()

    def test_null_and_nested_values_become_empty(self):
        """Test null and non-scalar values do not leak into the record."""
        payload = make_payload(firstName=None, lastName={"value": "Smith"})
        record = DocumentRecord.from_payload(payload)
        assert record.first_name == ""
        assert record.last_name == ""

    def test_scalars_are_stringified(self):
        """Test a numeric postal code is kept as text."""
        record = DocumentRecord.from_payload(make_payload(postalCode=12345))
        assert record.postal_code == "12345"

    def test_missing_fields_logged(self, caplog):
        """Test missing fields are reported as a warning."""
        DocumentRecord.from_payload({"document": {"firstName": "John"}})
        assert "lastName" in caplog.text

    def test_type_kept_as_given(self):
        """Test document type and country are not case-folded or mapped."""
        record = DocumentRecord.from_payload(make_payload(type="driving_license", issuingCountry="gbr"))
        assert (record.doc_type, record.issuing_country) == ("driving_license", "gbr")

    @pytest.mark.parametrize("payload", [None, [], "DONE"])
    def test_non_object_payload_rejected(self, payload):
        """Test a payload that is not an object raises ReconciliationError."""
        with pytest.raises(ReconciliationError):
            DocumentRecord.from_payload(payload)


class TestRegistrationRecord:
    """Tests for RegistrationRecord helpers."""

    def test_full_address(self):
        """Test house number and street joined by one space."""
        assert make_registration().full_address == "10 Downing Street"
        assert make_registration(house_number="").full_address == "Downing Street"

    def test_immutable(self):
        """Test a submitted record cannot be changed."""
        record = make_registration()
        with pytest.raises(AttributeError):
            record.city = "Leeds"

    @pytest.mark.parametrize("field", ["house_number", "street", "postcode"])
    def test_required_fields(self, field):
        """Test the fields the form insists on."""
        with pytest.raises(BadRequestError) as exc:
            make_registration(**{field: "  "}).validate()
        assert field in exc.value.message

    def test_flat_optional(self):
        """Test a missing flat designator is fine."""
        make_registration(flat=None).validate()

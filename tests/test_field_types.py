"""
Tests for field classification and field-specific extraction
"""

from protege.text_quality.field_types import (
    FieldType,
    classify_field,
    extract_email_only,
    extract_name_only,
)


def test_classify_field_categories():
    assert classify_field("prospectName") == FieldType.NAME
    assert classify_field("recipient") == FieldType.NAME
    assert classify_field("clientName") == FieldType.NAME
    assert classify_field("email") == FieldType.EMAIL
    assert classify_field("workMail") == FieldType.EMAIL
    assert classify_field("customMessage") == FieldType.MESSAGE
    assert classify_field("findingsSummary") == FieldType.MESSAGE
    assert classify_field("notes") == FieldType.MESSAGE
    assert classify_field("reportId") == FieldType.GENERAL
    assert classify_field("status") == FieldType.GENERAL


def test_classify_field_is_case_insensitive():
    assert classify_field("EMAIL") == FieldType.EMAIL
    assert classify_field("Description") == FieldType.MESSAGE


def test_classify_field_priority_order():
    """Name keywords win over email keywords, email over message"""
    assert classify_field("emailName") == FieldType.NAME
    assert classify_field("mailText") == FieldType.EMAIL


def test_classify_field_without_target():
    assert classify_field(None) == FieldType.GENERAL
    assert classify_field("") == FieldType.GENERAL


def test_extract_name_only():
    assert extract_name_only("Hey Sarah please") == "Sarah"
    assert extract_name_only("Dear John Smith,") == "John Smith,"
    assert extract_name_only("to Mary") == "Mary"
    assert extract_name_only("there") == ""


def test_extract_email_only():
    assert extract_email_only("contact user@example.com now") == "user@example.com"
    assert extract_email_only("first.last@mail.example.org") == "first.last@mail.example.org"
    assert extract_email_only("no address here") == "no address here"

"""
Test suite for the gateway exception hierarchy.
"""

from entity_gateway.core.exceptions import (
    EntityNotFoundError,
    GatewayError,
    MalformedIdentifierError,
    StoreFaultError,
)


def test_gateway_error_str_includes_details():
    error = GatewayError("boom", details={"key": "value"})

    assert str(error) == "boom | Details: {'key': 'value'}"


def test_gateway_error_str_without_details():
    assert str(GatewayError("boom")) == "boom"


def test_not_found_carries_entity_context():
    error = EntityNotFoundError("book", "7")

    assert error.message == "Book not found: 7"
    assert error.details == {"entity": "book", "entity_id": "7"}
    assert error.error_code == "not_found"


def test_malformed_identifier_has_own_message_and_code():
    error = MalformedIdentifierError("user", "xyz")

    assert isinstance(error, EntityNotFoundError)
    assert error.message == "Malformed user identifier: 'xyz'"
    assert error.error_code == "malformed_identifier"


def test_store_fault_records_operation():
    error = StoreFaultError("write failed", operation="insert_one")

    assert error.details["operation"] == "insert_one"
    assert error.error_code == "store_fault"

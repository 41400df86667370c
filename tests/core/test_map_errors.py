"""Error Mapper — tests for the single error-kind → response mapping.

Tests cover:
    - Client errors map to 400 with their historical body shapes
    - Persistence errors map to 500 with an operation-specific generic message
    - Unknown exceptions map to a generic 500
    - Internal detail never reaches a body
"""

import pytest

from dog_service.core.domain_types import DogOperation
from dog_service.core.errors import (
    DogValidationError, InvalidIdError, PersistenceError,
)
from dog_service.core.map_errors import (
    HandlerResponse, created, map_error_to_response, no_content, ok,
)


def test_validation_error_maps_to_400_without_details():
    response = map_error_to_response(DogValidationError(["age: Input should be a number"]))
    assert response == HandlerResponse(400, {"error": "Invalid input data"})


def test_invalid_id_maps_to_400_with_message_key():
    response = map_error_to_response(InvalidIdError("abc"))
    assert response == HandlerResponse(400, {"message": "id should be a number"})


@pytest.mark.parametrize("operation,message", [
    (DogOperation.CREATE, "An error occurred while creating the dog."),
    (DogOperation.LIST, "An error occurred while fetching the dogs."),
    (DogOperation.GET, "An error occurred while fetching the dog."),
    (DogOperation.UPDATE, "An error occurred while updating the dog."),
    (DogOperation.DELETE, "An error occurred while deleting the dog."),
])
def test_persistence_error_maps_to_500_per_operation(operation, message):
    response = map_error_to_response(
        PersistenceError(operation, "connection refused on 10.0.0.5"),
    )
    assert response.status_code == 500
    assert response.body == {"error": message}
    assert "10.0.0.5" not in str(response.body)


def test_persistence_error_without_operation_uses_fallback_message():
    response = map_error_to_response(PersistenceError(cause="driver error"))
    assert response.status_code == 500
    assert response.body == {"error": "An error occurred while accessing the database."}


def test_unknown_exception_maps_to_generic_500():
    response = map_error_to_response(KeyError("secret_column"))
    assert response == HandlerResponse(500, {"error": "An unexpected error occurred"})


def test_success_helpers():
    assert ok([]) == HandlerResponse(200, [])
    assert created({"id": 1}) == HandlerResponse(201, {"id": 1})
    assert no_content() == HandlerResponse(204, None)

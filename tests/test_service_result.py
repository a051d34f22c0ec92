import pytest

from dormitory.core.exceptions import (
    BadRequestError,
    BusinessRuleViolation,
    ConflictError,
    ResourceNotFoundError,
    ValidationError,
)
from dormitory.services.base import ErrorCode, ServiceError, ServiceResult


def test_success_unwraps_to_data():
    result = ServiceResult.success({"assigned": 1}, message="Done")

    assert result.is_success
    assert result.unwrap() == {"assigned": 1}
    assert result.message == "Done"


@pytest.mark.parametrize(
    "result, exception, status_code",
    [
        (ServiceResult.not_found("Room", "A101"), ResourceNotFoundError, 404),
        (ServiceResult.conflict("Student already has a placement"), ConflictError, 409),
        (ServiceResult.rule_violation("Room is reserved for disabled students"), BusinessRuleViolation, 400),
        (ServiceResult.invalid_state("Block is not active"), BadRequestError, 400),
        (
            ServiceResult.failure(ServiceError(code=ErrorCode.VALIDATION_ERROR, message="Bad year", field="year")),
            ValidationError,
            422,
        ),
    ],
)
def test_failures_unwrap_to_http_errors(result, exception, status_code):
    assert not result.is_success

    with pytest.raises(exception) as exc:
        result.unwrap()

    assert exc.value.status_code == status_code
    assert exc.value.message == result.message


def test_not_found_keeps_resource_details():
    with pytest.raises(ResourceNotFoundError) as exc:
        ServiceResult.not_found("Room", "A101", message="Room not found in this block").unwrap()

    assert exc.value.message == "Room not found in this block"
    assert exc.value.details == {"resource_type": "Room", "resource_id": "A101"}

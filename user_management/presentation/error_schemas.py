"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every error carrying an error_code (400, 404, 409, 500)."""

    detail: str = Field(
        ...,
        description="Human-readable error message",
        examples=["User with ID 0b7c... not found"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["USER_NOT_FOUND", "USER_ALREADY_EXISTS", "INVALID_ENTITY_STATE"],
    )


class ValidationErrorDetail(BaseModel):
    """Model for individual field validation error."""

    field: str = Field(
        ...,
        description="The field path where the validation error occurred (e.g., 'body.email')",
        examples=["body.email", "body.name"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=["Field required", "Input should be a valid string"],
    )


class ValidationErrorResponse(BaseModel):
    """Model for the complete 422 response for malformed request bodies.

    This is the actual format returned by the validation_error_handler
    in user_management/presentation/exception_handlers.py.
    """

    detail: str = Field(
        ...,
        description="High-level description of the error",
        examples=["Validation failed"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["VALIDATION_ERROR"],
    )
    errors: list[ValidationErrorDetail] = Field(
        ...,
        description="List of all validation errors found in the request",
        min_length=1,
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Validation failed",
                "error_code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "body.password",
                        "message": "Field required",
                    },
                ],
            }
        }
    }

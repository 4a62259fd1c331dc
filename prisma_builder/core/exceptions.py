from typing import Optional

from prisma_builder.core.schemas.fields import ValidationErrorKind


class AppException(Exception):
    """Base exception carrying an HTTP status and a machine-readable code."""

    status_code: int = 500
    error_code: str = "ERROR"

    def __init__(self, detail: str, target: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.target = target


class NotFoundException(AppException):
    status_code = 404
    error_code = "NOT_FOUND"


class ServiceException(AppException):
    status_code = 500
    error_code = "SERVICE_ERROR"


class SchemaValidationException(AppException):
    """Raised when a model cannot be rendered. Nothing is emitted."""

    status_code = 422
    error_code = "VALIDATION_ERROR"
    kind: ValidationErrorKind


class MissingModelNameException(SchemaValidationException):
    error_code = "MISSING_MODEL_NAME"
    kind = ValidationErrorKind.MISSING_MODEL_NAME

    def __init__(self, detail: str = "Model name is required"):
        super().__init__(detail, target="name")


class NoValidFieldsException(SchemaValidationException):
    error_code = "NO_VALID_FIELDS"
    kind = ValidationErrorKind.NO_VALID_FIELDS

    def __init__(self, detail: str = "Model must have at least 1 named field"):
        super().__init__(detail, target="fields")

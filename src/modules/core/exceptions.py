"""Catalog error taxonomy and its HTTP translation.

Every rejected mutation raises a ``DomainError`` subclass.  Each subclass
declares one ``ErrorKind``; the stable code and severity of a kind live
in ``ERROR_CATALOG`` so callers dispatch on ``error.kind`` /
``error.severity`` instead of on the concrete exception type.

The service layer never builds HTTP responses.  DRF calls
``domain_exception_handler`` (wired via ``EXCEPTION_HANDLER``) which maps
severity to a status code and renders a uniform error body.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, Dict, Optional

import structlog
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class Severity(StrEnum):
    """How the caller should classify a rejection."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID = "invalid"


class ErrorKind(StrEnum):
    """Closed set of reasons a catalog mutation can be rejected."""

    RESOURCE_NOT_FOUND = "resource_not_found"
    INVALID_FORMAT = "invalid_format"
    CATEGORY_ALREADY_EXISTS = "category_already_exists"
    CATEGORY_HAS_PRODUCTS = "category_has_products"
    DUPLICATE_NAME_IN_CATEGORY = "duplicate_name_in_category"
    CATEGORY_NOT_ACTIVE = "category_not_active"
    HAS_ACTIVE_SKUS = "has_active_skus"
    CATEGORY_CHANGE_WITH_SKUS = "category_change_with_skus"
    INVALID_DESCRIPTION_FORMAT = "invalid_description_format"
    DUPLICATE_COLOR_AND_SIZE = "duplicate_color_and_size"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INVALID_PRICE_UPDATE = "invalid_price_update"


@dataclass(frozen=True)
class ErrorSpec:
    code: Optional[str]
    severity: Severity


ERROR_CATALOG: Dict[ErrorKind, ErrorSpec] = {
    ErrorKind.RESOURCE_NOT_FOUND: ErrorSpec(None, Severity.NOT_FOUND),
    ErrorKind.INVALID_FORMAT: ErrorSpec(None, Severity.INVALID),
    ErrorKind.CATEGORY_ALREADY_EXISTS: ErrorSpec("CAT_001", Severity.CONFLICT),
    ErrorKind.CATEGORY_HAS_PRODUCTS: ErrorSpec("CAT_002", Severity.CONFLICT),
    ErrorKind.DUPLICATE_NAME_IN_CATEGORY: ErrorSpec("PROD_001", Severity.CONFLICT),
    ErrorKind.CATEGORY_NOT_ACTIVE: ErrorSpec("PROD_002", Severity.INVALID),
    ErrorKind.HAS_ACTIVE_SKUS: ErrorSpec("PROD_003", Severity.CONFLICT),
    ErrorKind.CATEGORY_CHANGE_WITH_SKUS: ErrorSpec("PROD_004", Severity.CONFLICT),
    ErrorKind.INVALID_DESCRIPTION_FORMAT: ErrorSpec("PROD_005", Severity.INVALID),
    ErrorKind.DUPLICATE_COLOR_AND_SIZE: ErrorSpec("SKU_001", Severity.CONFLICT),
    ErrorKind.INSUFFICIENT_STOCK: ErrorSpec("SKU_002", Severity.INVALID),
    ErrorKind.INVALID_PRICE_UPDATE: ErrorSpec("SKU_003", Severity.INVALID),
}


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


class DomainError(Exception):
    """Base class of the catalog error taxonomy.

    ``context`` carries the structured data (entity, field, offending
    value, thresholds) a caller needs to render its own message.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = {key: _jsonable(value) for key, value in context.items()}

    @property
    def code(self) -> Optional[str]:
        return ERROR_CATALOG[self.kind].code

    @property
    def severity(self) -> Severity:
        return ERROR_CATALOG[self.kind].severity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": str(self.kind),
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class ResourceNotFound(DomainError):
    """A referenced Category, Product or SKU does not exist."""

    kind = ErrorKind.RESOURCE_NOT_FOUND

    def __init__(self, resource: str, field: str, value: Any) -> None:
        super().__init__(
            f"{resource} not found with {field}: {value}",
            resource=resource,
            field=field,
            value=value,
        )
        self.resource = resource


class InvalidFormat(DomainError, ValueError):
    """A single field value failed a format validator.

    Also a ``ValueError`` so pydantic ``field_validator`` hooks turn it
    into a regular ``ValidationError``.
    """

    kind = ErrorKind.INVALID_FORMAT

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(reason, field=field, value=value)
        self.field = field


# ---------------------------------------------------------------------------
# DRF exception handler
# ---------------------------------------------------------------------------

_STATUS_BY_SEVERITY: Dict[Severity, int] = {
    Severity.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Severity.CONFLICT: status.HTTP_409_CONFLICT,
    Severity.INVALID: status.HTTP_400_BAD_REQUEST,
}

_TITLE_BY_SEVERITY: Dict[Severity, str] = {
    Severity.NOT_FOUND: "Not Found",
    Severity.CONFLICT: "Conflict",
    Severity.INVALID: "Bad Request",
}


def _request_path(context: Dict[str, Any]) -> str:
    request = context.get("request")
    return request.path if request is not None else ""


def _domain_error_response(exc: DomainError, context: Dict[str, Any]) -> Response:
    status_code = _STATUS_BY_SEVERITY[exc.severity]
    path = _request_path(context)
    logger.warning(
        "api.domain_error",
        kind=str(exc.kind),
        code=exc.code,
        path=path,
        status_code=status_code,
    )
    body = {
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "error": _TITLE_BY_SEVERITY[exc.severity],
        **exc.to_dict(),
        "path": path,
    }
    return Response(body, status=status_code)


def _validation_error_response(
    exc: PydanticValidationError, context: Dict[str, Any]
) -> Response:
    validation_errors: Dict[str, str] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
        validation_errors[field] = error["msg"]

    path = _request_path(context)
    logger.info("api.validation_failed", path=path, fields=sorted(validation_errors))
    body = {
        "timestamp": timezone.now().isoformat(),
        "status": status.HTTP_400_BAD_REQUEST,
        "error": "Validation Failed",
        "message": "Invalid input parameters",
        "path": path,
        "validation_errors": validation_errors,
    }
    return Response(body, status=status.HTTP_400_BAD_REQUEST)


def domain_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Translate catalog errors into HTTP responses.

    Anything that is not a ``DomainError`` or a pydantic
    ``ValidationError`` falls through to DRF's default handler.
    """
    if isinstance(exc, DomainError):
        return _domain_error_response(exc, context)
    if isinstance(exc, PydanticValidationError):
        return _validation_error_response(exc, context)
    return exception_handler(exc, context)

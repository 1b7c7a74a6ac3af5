"""Map domain errors to HTTP responses.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Only the error code, the
user-safe message and, for field errors, the field name leave the process.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TIME_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_REQUIRED_LIST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_BOOKING_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_SLUG: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_BOOKING: status.HTTP_409_CONFLICT,
    ErrorCode.STORAGE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    http_status = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
    level = logging.ERROR if http_status >= 500 else logging.INFO
    logger.log(level, "Request rejected: %s", exc, extra={"error_code": exc.code.value})

    body = {"code": exc.code.value, "message": exc.message}
    field = getattr(exc, "field", None)
    if field:
        body["field"] = field
    return Response({"error": body}, status=http_status)

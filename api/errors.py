# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: errors.py
# -----------------------------------------------------------------------------
from fastapi import HTTPException

from services.KBServiceResult import ErrorKind, ServiceResult

STATUS_BY_ERROR_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UPSTREAM: 500,
}


def to_http_exception(result: ServiceResult) -> HTTPException:
    """Map a failed ServiceResult onto the HTTP status for its error kind."""
    status = STATUS_BY_ERROR_KIND.get(result.error_kind, 500)
    return HTTPException(status_code=status, detail=result.error or "request failed")

from fastapi import Request, status
from fastapi.responses import JSONResponse

from mesoplan.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from mesoplan.core.logging import get_logger
from mesoplan.schemas.base import APIError, APIResponse, ResponseMeta


logger = get_logger(__name__)

# Anything not listed here (StorageError included) is reported as a 500.
ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    BusinessRuleError: 422,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for(exc: DomainError) -> int:
    return ERROR_STATUS_MAP.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a DomainError inside the standard response envelope."""
    status_code = status_for(exc)
    request_id = getattr(request.state, "request_id", None)

    log = logger.error if status_code >= 500 else logger.warning
    log("domain_error", code=exc.code, status_code=status_code, error_message=exc.message)

    body = APIResponse[None](
        meta=ResponseMeta(request_id=request_id),
        errors=[APIError.from_exception(exc)],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

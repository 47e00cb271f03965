"""
Service-layer error taxonomy.

Services raise these instead of HTTPException so they stay usable outside
a request. The handler registered in app.main renders them as
{"message": ..., "status_code": ...} with the matching HTTP status.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """A referenced entity does not exist (or is not reachable from its owner)."""
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ServiceError):
    """A mutation failed for a reason other than validation."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class BadRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    """Render a ServiceError as a JSON body carrying its status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "status_code": exc.status_code},
    )

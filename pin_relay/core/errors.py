import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

NO_FILE = "No file provided"
KEYS_NOT_CONFIGURED = "Pinata API keys not configured"
IMAGE_UPLOAD_FAILED = "Failed to upload image"
METADATA_UPLOAD_FAILED = "Failed to upload metadata"
INVALID_JSON = "Invalid JSON body"


class RelayError(Exception):
    """An error that is returned to the caller as {"error": message}."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    if exc.status_code >= 500 and exc.__cause__ is not None:
        cause = exc.__cause__
        logger.error(
            "%s: %s",
            exc.message,
            cause,
            exc_info=(type(cause), cause, cause.__traceback__),
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
    else:
        logger.warning(
            exc.message,
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

import json
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from ...core.config import Settings, get_settings
from ...core.errors import (
    IMAGE_UPLOAD_FAILED,
    INVALID_JSON,
    KEYS_NOT_CONFIGURED,
    METADATA_UPLOAD_FAILED,
    NO_FILE,
    RelayError,
)
from ...schemas.common import ErrorResponse
from ...schemas.pinata import PinResult
from ...schemas.uploads import UploadResponse
from ...services.pinata import PinningClient, PinningError, gateway_uri
from ..deps import get_pinning_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["uploads"])

ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

def _require_client(client: Optional[PinningClient]) -> PinningClient:
    if client is None:
        raise RelayError(500, KEYS_NOT_CONFIGURED)
    return client

def _log_pin(pin: PinResult) -> None:
    logger.info("pinned %s (size=%s, at=%s)", pin.IpfsHash, pin.PinSize, pin.Timestamp)

@router.post("/upload-image", response_model=UploadResponse, responses=ERRORS)
async def upload_image(
    request: Request,
    client: Optional[PinningClient] = Depends(get_pinning_client),
    settings: Settings = Depends(get_settings),
):
    """
    Pins one multipart file field named "file" and returns its gateway URI.
    A plain text value under "file" counts as no file.
    """
    async with request.form() as form:
        file = form.get("file")
        if not isinstance(file, UploadFile):
            raise RelayError(400, NO_FILE)
        client = _require_client(client)

        content = await file.read()
        filename = file.filename or "file"
        content_type = file.content_type or "application/octet-stream"
    logger.debug("pinning %s (%d bytes, %s)", filename, len(content), content_type)

    # requests blocks; keep it off the event loop
    try:
        pin = await run_in_threadpool(client.pin_file, content, filename, content_type)
    except PinningError as e:
        raise RelayError(500, IMAGE_UPLOAD_FAILED) from e

    _log_pin(pin)
    return UploadResponse(uri=gateway_uri(settings.PINATA_GATEWAY_URL, pin.IpfsHash))

@router.post("/upload-metadata", response_model=UploadResponse, responses=ERRORS)
async def upload_metadata(
    request: Request,
    client: Optional[PinningClient] = Depends(get_pinning_client),
    settings: Settings = Depends(get_settings),
):
    """
    Pins an arbitrary JSON document. The body is not validated; an empty
    body is pinned as {}.
    """
    client = _require_client(client)

    raw = await request.body()
    if not raw.strip():
        metadata = {}
    else:
        try:
            metadata = json.loads(raw)
        except ValueError as e:
            raise RelayError(400, INVALID_JSON) from e

    try:
        pin = await run_in_threadpool(client.pin_json, metadata, settings.PINATA_METADATA_NAME)
    except PinningError as e:
        raise RelayError(500, METADATA_UPLOAD_FAILED) from e

    _log_pin(pin)
    return UploadResponse(uri=gateway_uri(settings.PINATA_GATEWAY_URL, pin.IpfsHash))

"""MT799 upload and read-back endpoints."""

from __future__ import annotations

import logging
from typing import Union

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool

from swiftmt799.api.dependencies import get_store
from swiftmt799.core.exceptions import MissingUploadError, UploadReadError
from swiftmt799.core.protocols import IMessageStore
from swiftmt799.models.message import SwiftMessageRow, UploadResponse
from swiftmt799.parsing.mt799 import decode_upload, parse_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/SwiftMessage", tags=["swift-message"])

SAVED_MESSAGE = "File processed successfully."
NOT_SAVED_MESSAGE = "File parsed but could not be saved to the database."


@router.post("", response_model=UploadResponse)
async def upload_swift_file(
    file: Union[UploadFile, str, None] = File(None),
    store: IMessageStore = Depends(get_store),
) -> UploadResponse:
    """Parse an uploaded MT799 file and store its :20:, :21: and :79: fields.

    A store failure does not fail the request: the parsed fields are still
    returned, with ``savedToDatabase`` set to false.
    """
    logger.info("UploadSwiftFile called")
    # A plain form field named "file" carries no upload
    if file is None or isinstance(file, str):
        logger.warning("No file uploaded.")
        raise MissingUploadError("No file uploaded.")

    try:
        data = await file.read()
    except (OSError, ValueError) as exc:
        logger.exception("Error reading file content.")
        raise UploadReadError("Error processing file.") from exc

    if not data:
        logger.warning("Uploaded file %r is empty.", file.filename)
        raise MissingUploadError("No file uploaded.")
    logger.info("File content read successfully (%d bytes).", len(data))

    message = parse_message(decode_upload(data))

    result = await run_in_threadpool(store.persist, message)
    if result.saved:
        logger.info("File processed and data saved successfully (Id=%s).", result.row_id)
    else:
        logger.error("Parsed message was not saved: %s", result.error)

    return UploadResponse(
        message=SAVED_MESSAGE if result.saved else NOT_SAVED_MESSAGE,
        parsed_fields=message,
        saved_to_database=result.saved,
    )


@router.get("", response_model=list[SwiftMessageRow])
async def list_swift_messages(
    limit: int = Query(50, ge=1, le=500),
    store: IMessageStore = Depends(get_store),
) -> list[SwiftMessageRow]:
    """Return the most recently stored messages, newest first."""
    return await run_in_threadpool(store.list_messages, limit)


@router.get("/{message_id}", response_model=SwiftMessageRow)
async def get_swift_message(
    message_id: int,
    store: IMessageStore = Depends(get_store),
) -> SwiftMessageRow:
    row = await run_in_threadpool(store.get, message_id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"Swift message {message_id} not found.")
    return row

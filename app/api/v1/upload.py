import logging
from datetime import datetime, timezone

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.parsing import (
    SUPPORTED_FORMATS,
    DocumentParseError,
    FileTooLargeError,
    is_supported_mime_type,
    parse_document,
    validate_file_size,
)
from app.schemas.analysis import SupportedFormat, UploadedDocument, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_PARSE_FAILED_MESSAGE = (
    "Could not extract text from the uploaded file. Please ensure the file contains "
    "readable, selectable text (not a scanned image)."
)


@router.post("/upload", summary="Upload a resume and extract its text")
@rate_limit(settings.upload_rate_limit)
async def upload_resume(request: Request, resume: UploadFile = File(...)):
    _ = request
    mime_type = resume.content_type or ""
    if not is_supported_mime_type(mime_type):
        logger.warning("upload_rejected mime_type=%s", mime_type)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Only PDF, DOCX, and TXT files are allowed.",
        )

    content = await resume.read()
    try:
        validate_file_size(content, settings.max_upload_bytes)
        parsed = parse_document(content, mime_type)
    except FileTooLargeError as exc:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(exc)) from exc
    except DocumentParseError as exc:
        logger.warning("upload_parse_failed file=%s: %s", resume.filename, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_PARSE_FAILED_MESSAGE) from exc

    file_name = resume.filename or "Resume"
    response = UploadResponse(
        data=UploadedDocument(
            file_name=file_name,
            file_type=parsed.mime_type,
            text=parsed.text,
            text_length=len(parsed.text),
            word_count=len(parsed.text.split()),
        ),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return response.model_dump(by_alias=True)


@router.get("/upload/supported-formats", summary="List supported resume formats")
async def supported_formats():
    formats = [SupportedFormat(**item).model_dump(by_alias=True) for item in SUPPORTED_FORMATS]
    max_mb = settings.max_upload_bytes / (1024 * 1024)
    return {"supportedFormats": formats, "maxFileSize": f"{max_mb:g}MB"}

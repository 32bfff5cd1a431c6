"""FastAPI application exposing the docmerge engine over HTTP."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response

from docmerge import (
    DocMergeError,
    EmptyBatchError,
    InputFile,
    describe_failure,
    merge_documents,
    partition_supported,
)
from docmerge.classifier import DEFAULT_CLASSIFIER
from docmerge.utils import get_logger

LOGGER = get_logger("docmerge.http")

STATIC_DIR = Path(__file__).resolve().parent / "static"
DEFAULT_PORT = 3000

app = FastAPI(title="docmerge API", version="1.0.0")


def _upload_name(upload: UploadFile, index: int) -> str:
    """Return the client supplied name of ``upload``, keeping folder-relative paths."""

    name = (upload.filename or "").replace("\\", "/").lstrip("/")
    return name or f"file_{index}"


async def _read_uploads(files: List[UploadFile]) -> list[InputFile]:
    batch: list[InputFile] = []
    for index, upload in enumerate(files, start=1):
        contents = await upload.read()
        batch.append(InputFile(_upload_name(upload, index), contents, upload.content_type))
    return batch


@app.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the upload form."""

    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@app.get("/health", response_class=JSONResponse)
async def health() -> dict[str, str]:
    """Lightweight health endpoint for uptime checks."""
    return {"status": "ok"}


@app.post("/merge")
async def merge_uploads(
    files: Optional[List[UploadFile]] = File(None, description="Files to merge, in order"),
    quality: str | None = Form(
        None,
        description="Image recompression quality: low, medium or high.",
    ),
    add_bookmarks: bool = Form(
        False,
        description="When true, create a bookmark for each merged file.",
    ),
) -> Response:
    """Merge the uploaded files, in upload order, into a single PDF.

    Files whose type is not recognised are dropped before merging. Files that
    fail to convert are replaced by an error page; encrypted or unreadable
    PDFs fail the whole request.
    """

    if not files:
        return PlainTextResponse("No files uploaded.", status_code=400)

    batch, rejected = partition_supported(await _read_uploads(files), DEFAULT_CLASSIFIER)
    if rejected:
        LOGGER.info("Ignoring %d unsupported upload(s)", len(rejected))
    if not batch:
        return PlainTextResponse("No supported files uploaded.", status_code=400)

    try:
        result = await run_in_threadpool(
            merge_documents,
            batch,
            quality=quality,
            bookmarks=add_bookmarks,
        )
    except EmptyBatchError as exc:
        return PlainTextResponse(str(exc), status_code=400)
    except DocMergeError as exc:
        LOGGER.error("Merge failed: %s", exc)
        return PlainTextResponse(describe_failure(exc), status_code=500)
    except Exception as exc:  # pragma: no cover - unexpected engine failure
        LOGGER.exception("Unexpected merge failure")
        return PlainTextResponse(describe_failure(exc), status_code=500)

    headers = {
        "Content-Disposition": 'attachment; filename="merged.pdf"',
        "X-DocMerge-Page-Count": str(result.page_count),
        "X-DocMerge-Failed-Files": str(len(result.failed)),
    }
    return Response(content=result.data, media_type="application/pdf", headers=headers)


__all__ = ["app"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", DEFAULT_PORT)))

"""Catch-all GET route: every path is a listing or a download."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import BinaryIO, Iterator
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, JSONResponse, Response, StreamingResponse

from worldbanc.api.deps import get_dispatcher, is_authenticated
from worldbanc.services.dispatcher import DownloadTarget, LandingPage, RequestDispatcher

router = APIRouter()

INDEX_HTML = Path(__file__).resolve().parent.parent.parent / "static" / "index.html"
CHUNK_SIZE = 64 * 1024


def _iter_file(stream: BinaryIO) -> Iterator[bytes]:
    with stream:
        while chunk := stream.read(CHUNK_SIZE):
            yield chunk


def content_disposition(filename: str) -> str:
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


def _download_response(target: DownloadTarget) -> StreamingResponse:
    media_type, _ = mimetypes.guess_type(target.filename)
    return StreamingResponse(
        _iter_file(target.stream),
        media_type=media_type or "application/octet-stream",
        headers={
            "Content-Disposition": content_disposition(target.filename),
            "Content-Length": str(target.size),
        },
    )


@router.get("/{full_path:path}", include_in_schema=False)
async def browse(
    full_path: str,
    request: Request,
    authenticated: bool = Depends(is_authenticated),
    dispatcher: RequestDispatcher = Depends(get_dispatcher),
) -> Response:
    """Landing page when unauthenticated, else listing or `?download` file."""
    result = await dispatcher.dispatch(
        "/" + full_path,
        authenticated=authenticated,
        download="download" in request.query_params,
    )
    if isinstance(result, LandingPage):
        return FileResponse(INDEX_HTML, media_type="text/html")
    if isinstance(result, DownloadTarget):
        return _download_response(result)
    return JSONResponse(result.model_dump(by_alias=True))

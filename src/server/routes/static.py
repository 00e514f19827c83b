"""
Static Routes

Catch-all that serves the front end from the public directory.
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, PlainTextResponse

router = APIRouter(tags=["static"])

ENTRY_DOCUMENT = "index.html"


def resolve_static_path(public_dir: Path, requested: str) -> Optional[Path]:
    """
    File to serve for a requested path.

    An existing file inside public_dir wins, then the entry document.
    Paths that escape public_dir fall back to the entry document.
    """
    root = public_dir.resolve()

    if requested:
        candidate = (root / requested).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate

    entry = root / ENTRY_DOCUMENT
    if entry.is_file():
        return entry
    return None


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_front_end(full_path: str, request: Request):
    """Serve static assets, the entry document, or a plain 404."""
    path = resolve_static_path(request.app.state.server_config.public_dir, full_path)
    if path is None:
        return PlainTextResponse("Not found", status_code=404)
    return FileResponse(path)


@router.api_route(
    "/{full_path:path}",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False
)
async def not_found(full_path: str):
    """Any other method on a non-API path is a plain 404."""
    return PlainTextResponse("Not found", status_code=404)

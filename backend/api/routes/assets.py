"""Static asset routes: the HTML entry point and the build/vendor cascade."""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse


logger = logging.getLogger(__name__)

router = APIRouter(tags=["assets"])


def resolve_asset(root: Path, asset_path: str) -> Optional[Path]:
    """
    Find `asset_path` under `root`.

    Directories resolve to their index.html. Returns None for misses and
    for paths that escape `root`.
    """
    base = root.resolve()
    candidate = (base / asset_path).resolve()

    if not candidate.is_relative_to(base):
        return None
    if candidate.is_dir():
        candidate = candidate / "index.html"
    if candidate.is_file():
        return candidate
    return None


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Serve the HTML entry point."""
    settings = request.app.state.settings
    built = settings.dist_path / "index.html"
    if built.is_file():
        return FileResponse(built)

    # No build output yet, render the shell for a fresh session
    return HTMLResponse(request.app.state.renderer.render_shell())


@router.get("/{asset_path:path}")
async def asset(asset_path: str, request: Request):
    """Serve a file from the build output, falling back to node_modules."""
    settings = request.app.state.settings

    for root in (settings.dist_path, settings.node_modules_path):
        found = resolve_asset(root, asset_path)
        if found is not None:
            return FileResponse(found)

    logger.debug("Asset not found: %s", asset_path)
    raise HTTPException(status_code=404, detail="Not Found")

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, JSONResponse

router = APIRouter()

CATCH_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _static_file(static_dir: Path, full_path: str):
    root = static_dir.resolve()
    if full_path:
        candidate = (root / full_path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate

    index = root / "index.html"
    if index.is_file():
        return index
    return None


# Registered last: anything no other route matched ends up here
@router.api_route("/{full_path:path}", methods=CATCH_ALL_METHODS, include_in_schema=False)
def frontend(full_path: str, request: Request):
    if request.method in ("GET", "HEAD") and not request.url.path.startswith("/api"):
        path = _static_file(request.app.state.settings.static_dir, full_path)
        if path is not None:
            return FileResponse(path)

    return JSONResponse(status_code=404, content={"error": "Route not found"})

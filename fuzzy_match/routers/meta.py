"""Health and version endpoints."""
import importlib.metadata
import sys
from typing import Any, Dict

from fastapi import APIRouter

from fuzzy_match import __version__
from fuzzy_match.scorer import strategy_names

router = APIRouter()

SERVICE_DEPENDENCIES = ("fastapi", "uvicorn", "pydantic", "pydantic-settings")


def dependency_versions() -> Dict[str, str]:
    """Installed versions of the service dependencies."""
    deps = {}
    for name in SERVICE_DEPENDENCIES:
        try:
            deps[name] = importlib.metadata.version(name)
        except importlib.metadata.PackageNotFoundError:
            deps[name] = "unknown"
    return deps


@router.get("/healthz")
async def healthz() -> Dict[str, bool]:
    return {"ok": True}


@router.get("/version")
async def version() -> Dict[str, Any]:
    """Get version and build info."""
    return {
        "service": "fuzzy-match",
        "version": __version__,
        "python_version": sys.version,
        "strategies": strategy_names(),
        "dependencies": dependency_versions(),
    }

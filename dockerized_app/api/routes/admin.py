from __future__ import annotations

from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from dockerized_app.api.deps import get_application
from dockerized_app.bootstrap import Application

__all__: list[str] = [
    "router",
]

router = APIRouter(
    prefix="/v1",
    tags=["Admin"],
)

ApplicationDep = Annotated[Application, Depends(get_application)]


@router.get("/health", response_model=Dict[str, str])
async def health(application: ApplicationDep) -> Dict[str, str]:
    """Return service health status."""
    return {
        "status": "ok",
        "commit_sha": application.config.commit_sha or "unknown",
    }


@router.get("/version", summary="Application version information")
async def version(request: Request, application: ApplicationDep) -> JSONResponse:
    """Return the declared application version plus the git commit SHA."""

    return JSONResponse(
        {
            "version": request.app.version,
            "commit_sha": application.config.commit_sha,
        }
    )


@router.get("/settings", summary="Settings loaded at startup")
async def current_settings(application: ApplicationDep) -> Dict[str, Any]:
    """Return the Settings record currently held by the store, by wire name."""
    return application.store.get().to_payload()

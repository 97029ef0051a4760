from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from dockerized_app.api.deps import get_application
from dockerized_app.bootstrap import Application
from dockerized_app.core.exceptions import RouteNotFoundError

__all__: list[str] = [
    "router",
]

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Pages"])

ApplicationDep = Annotated[Application, Depends(get_application)]


def _render(application: Application, path: str) -> Response:
    route = application.router.match(path)
    if route is None:
        raise RouteNotFoundError(path)

    if route.is_redirect:
        target = f"/{route.redirect_to}"
        logger.debug("page_redirect", source=path, target=target)
        return RedirectResponse(url=target)

    view = application.router.resolve(path)
    return HTMLResponse(content=application.shell.render(view))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(application: ApplicationDep) -> Response:
    return _render(application, "")


@router.get("/{page}", response_class=HTMLResponse, summary="Render a page")
async def page(page: str, application: ApplicationDep) -> Response:
    """Render the view registered under *page*, or follow its redirect."""
    return _render(application, page)

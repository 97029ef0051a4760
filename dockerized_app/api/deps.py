from __future__ import annotations

from fastapi import HTTPException, Request, status

from dockerized_app.bootstrap import Application

__all__: list[str] = ["get_application"]


def get_application(request: Request) -> Application:
    """Return the bootstrapped :class:`Application` stored by the lifespan."""

    application = getattr(request.app.state, "application", None)
    if application is None:
        # Only reachable when the app is served without running its lifespan.
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Application has not finished bootstrapping.",
        )
    return application

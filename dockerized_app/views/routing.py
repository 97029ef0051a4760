from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from dockerized_app.core.exceptions import RouteNotFoundError
from dockerized_app.settings.models import Settings
from dockerized_app.views.pages import OneView, TwoView, View

__all__: list[str] = [
    "DEFAULT_ROUTE",
    "Route",
    "ViewRouter",
    "build_router",
]

DEFAULT_ROUTE: str = "one"

# Guards against redirect cycles in a hand-edited route table.
_MAX_REDIRECTS: int = 8


@dataclass(frozen=True)
class Route:
    """A path bound either to a view or to another path (redirect)."""

    path: str
    view: Optional[View] = None
    redirect_to: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None


def _normalise(path: str) -> str:
    return path.strip("/")


class ViewRouter:
    """Exact-match route table. There is no wildcard fallback."""

    def __init__(self, routes: Sequence[Route]) -> None:
        self._routes: Dict[str, Route] = {}
        for route in routes:
            if (route.view is None) == (route.redirect_to is None):
                raise ValueError(
                    f"Route '{route.path}' needs exactly one of view or redirect_to"
                )
            self._routes[_normalise(route.path)] = route

    @property
    def paths(self) -> list[str]:
        return list(self._routes)

    def match(self, path: str) -> Optional[Route]:
        return self._routes.get(_normalise(path))

    def resolve(self, path: str) -> View:
        """Follow redirects from *path* and return the target view.

        Raises:
            RouteNotFoundError: No route is registered along the way.
        """

        current = _normalise(path)
        for _ in range(_MAX_REDIRECTS):
            route = self.match(current)
            if route is None:
                raise RouteNotFoundError(current)
            if route.view is not None:
                return route.view
            current = _normalise(route.redirect_to or "")
        raise RouteNotFoundError(path)


def build_router(settings: Settings) -> ViewRouter:
    """Construct the application views and their route table."""

    return ViewRouter(
        [
            Route("one", view=OneView(settings)),
            Route("two", view=TwoView(settings)),
            Route("", redirect_to=DEFAULT_ROUTE),
        ]
    )

from __future__ import annotations

from .pages import AppShell, OneView, TwoView, View  # noqa: F401
from .routing import Route, ViewRouter, build_router  # noqa: F401

__all__: list[str] = [
    "AppShell",
    "OneView",
    "Route",
    "TwoView",
    "View",
    "ViewRouter",
    "build_router",
]

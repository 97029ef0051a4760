"""Router package.

Each route module defines a module-level ``router`` of type
``fastapi.APIRouter``; registration happens in :mod:`dockerized_app.api.app`.
"""

from __future__ import annotations

__all__: list[str] = []

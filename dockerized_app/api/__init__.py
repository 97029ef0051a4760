"""dockerized-app HTTP layer.

The FastAPI application lives in :mod:`dockerized_app.api.app`; import it from
there (``uvicorn dockerized_app.api.app:app``).
"""

from __future__ import annotations

__all__: list[str] = []

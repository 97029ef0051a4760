"""dockerized-app: a two-page demo application whose runtime settings are
fetched over HTTP before the first page is served."""

from __future__ import annotations

__version__ = "0.1.0"

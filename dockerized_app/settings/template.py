"""Render ``settings.json`` from a template and the process environment.

This is the "build once, run anywhere" step: the image ships a template such
as ``{"baseUrl": "${BASE_URL}"}`` and the container entrypoint renders the real
settings file from the environment it was started with.
"""

from __future__ import annotations

import json
from pathlib import Path
from string import Template
from typing import Any, Dict, Mapping

from dockerized_app.core.exceptions import SettingsTemplateError

__all__: list[str] = [
    "render_settings",
    "write_settings_file",
]


def _json_escape(value: str) -> str:
    """Escape *value* for use inside a JSON string literal."""
    return json.dumps(value)[1:-1]


def render_settings(template: str, environ: Mapping[str, str]) -> Dict[str, Any]:
    """Substitute ``${VAR}`` placeholders and parse the result as a JSON object.

    Values are JSON-escaped, so quotes or backslashes in the environment do
    not break the document. ``$$`` yields a literal ``$``.

    Raises:
        SettingsTemplateError: A placeholder has no value, the template syntax
            is invalid, or the rendered document is not a JSON object.
    """

    escaped = {key: _json_escape(value) for key, value in environ.items()}
    try:
        rendered = Template(template).substitute(escaped)
    except KeyError as exc:
        raise SettingsTemplateError(
            f"Missing environment variable: {exc.args[0]}"
        ) from exc
    except ValueError as exc:
        raise SettingsTemplateError(f"Invalid template placeholder: {exc}") from exc

    try:
        payload = json.loads(rendered)
    except json.JSONDecodeError as exc:
        raise SettingsTemplateError(f"Rendered settings are not JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise SettingsTemplateError("Rendered settings must be a JSON object")
    return payload


def write_settings_file(
    template_path: Path,
    output_path: Path,
    environ: Mapping[str, str],
) -> Dict[str, Any]:
    """Render *template_path* and write the result to *output_path*."""

    payload = render_settings(template_path.read_text(encoding="utf-8"), environ)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=4) + "\n", encoding="utf-8")
    return payload

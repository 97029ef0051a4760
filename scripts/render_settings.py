#!/usr/bin/env python
"""
Render ``settings.json`` from its template using the current environment.

Intended as the container entrypoint step of a "build once, run anywhere"
image: the same image is started with a different ``BASE_URL`` per
environment and this script writes the matching settings file before the
server that hosts it starts.

Usage:
  BASE_URL=https://api.example.com python scripts/render_settings.py
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure the script can find the package when run from a checkout
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from dockerized_app.core.exceptions import SettingsTemplateError  # noqa: E402
from dockerized_app.settings.template import write_settings_file  # noqa: E402

__all__: list[str] = []

_CONFIG_DIR = project_root / "assets" / "config"


def _parse_args() -> argparse.Namespace:  # noqa: D401 – CLI helper
    parser = argparse.ArgumentParser(
        description="Render settings.json from a template and the environment",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=_CONFIG_DIR / "settings.template.json",
        help="JSON template with ${VAR} placeholders.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=_CONFIG_DIR / "settings.json",
        help="Where to write the rendered settings.",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Optional .env file loaded before rendering (never overrides).",
    )
    return parser.parse_args()


def main() -> None:  # noqa: D401 – entry-point
    args = _parse_args()
    load_dotenv(args.env_file)

    try:
        payload = write_settings_file(args.template, args.output, os.environ)
    except (SettingsTemplateError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Wrote {args.output}")
    print(json.dumps(payload, indent=4))


if __name__ == "__main__":  # pragma: no cover – CLI only
    main()

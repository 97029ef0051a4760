"""Server-rendered pages.

Views receive the resolved :class:`Settings` at construction time; they never
look the store up themselves.
"""

from __future__ import annotations

from html import escape

from dockerized_app.settings.models import Settings

__all__: list[str] = [
    "AppShell",
    "OneView",
    "TwoView",
    "View",
]


class View:
    """Base class for a routable page body."""

    name: str = ""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def render(self) -> str:
        return f"<p>{escape(self.name)} works!</p>"


class OneView(View):
    name = "one"


class TwoView(View):
    name = "two"


class AppShell:
    """Page chrome shared by every view: heading, settings banner, navigation."""

    def __init__(self, title: str, settings: Settings) -> None:
        self.title = title
        self.settings = settings

    def render(self, view: View) -> str:
        """Return the full HTML document with *view* as the main content."""
        title = escape(self.title)
        base_url = escape(self.settings.base_url) or "<em>not configured</em>"
        links = "\n".join(
            f'            <li><a href="/{name}"{_active(name, view)}>{name}</a></li>'
            for name in ("one", "two")
        )
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
</head>
<body>
    <header>
        <h1>Welcome to {title}!</h1>
        <p class="base-url">Base URL: {base_url}</p>
        <nav>
        <ul>
{links}
        </ul>
        </nav>
    </header>
    <main>
        {view.render()}
    </main>
</body>
</html>
"""


def _active(name: str, view: View) -> str:
    return ' aria-current="page"' if name == view.name else ""

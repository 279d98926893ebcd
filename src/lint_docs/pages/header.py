"""Shared site header."""

from __future__ import annotations

from jinja2 import Environment

_env = Environment(autoescape=True)

_HEADER_TMPL = _env.from_string(
    """<header class="flex items-center justify-between py-6 border-b border-gray-200">
  <a href="/" class="text-2xl font-bold">{{ site_name }}</a>
  <nav class="space-x-4">
    {%- for label, href in links %}
    <a href="{{ href }}" class="hover:underline">{{ label }}</a>
    {%- endfor %}
  </nav>
</header>"""
)

SITE_NAME = "lint-docs"
NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("Rules", "/"),
    ("Ignoring rules", "/ignoring-rules"),
)


class Header:
    """Parameterless header rendered above every page."""

    def render(self) -> str:
        return _HEADER_TMPL.render(site_name=SITE_NAME, links=NAV_LINKS)

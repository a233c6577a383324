"""HTML rendering for the palette landing page."""

from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from palette_api.palette.generator import theme_info

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class PaletteRenderer:
    """Renders the palette page from a Jinja2 template."""

    def __init__(self, templates_dir: Optional[Path] = None) -> None:
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
            autoescape=select_autoescape(enabled_extensions=["html"]),
        )
        self._page_tpl = self._env.get_template("palette.html")

    def render(self, palette: Sequence[str], version: str) -> str:
        """Render the page for a palette.

        Args:
            palette: Colors to show as swatches.
            version: Version label shown in the badge and info grid.

        Returns:
            Complete HTML document.
        """
        theme = theme_info(version)
        return self._page_tpl.render(
            palette=list(palette),
            version=version,
            theme=theme,
        )


_renderer: Optional[PaletteRenderer] = None


def render_palette_page(palette: Sequence[str], version: str) -> str:
    """Render the palette page with a shared renderer."""
    global _renderer

    if _renderer is None:
        _renderer = PaletteRenderer()
    return _renderer.render(palette, version)

"""HTML rendering of computed sketches."""

from circlesketch.render.html import render_embed, render_page

__all__ = ["render_embed", "render_page"]

"""Frame artifact renderers: SVG card, embed descriptor and preview page."""

from ttframe.render.embed import EmbedDescriptor, build_embed_descriptor
from ttframe.render.image import render_image
from ttframe.render.page import render_preview_page

__all__ = [
    "EmbedDescriptor",
    "build_embed_descriptor",
    "render_image",
    "render_preview_page",
]

"""SVG trade card renderer."""

from __future__ import annotations

from ttframe.core.types import TradeSummary
from ttframe.render.templating import render_template

IMAGE_WIDTH = 600
IMAGE_HEIGHT = 315
IMAGE_MEDIA_TYPE = "image/svg+xml"


def render_image(summary: TradeSummary, *, app_name: str = "ThunderTrack") -> str:
    """Render the fixed-layout 600x315 trade card as SVG markup."""
    return render_template(
        "trade_card.svg.j2",
        summary=summary,
        width=IMAGE_WIDTH,
        height=IMAGE_HEIGHT,
        title=f"{app_name} Trade Review",
        hashtags=f"#{app_name} #TTrade",
    )

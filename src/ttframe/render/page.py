"""HTML preview page renderer for frame and link-preview clients."""

from __future__ import annotations

import time
from collections.abc import Callable

from ttframe.core.config import Settings
from ttframe.core.types import PageOptions, TradeSummary
from ttframe.ingest.normalizer import format_signed_pnl
from ttframe.render.embed import build_embed_descriptor, default_diary_id
from ttframe.render.links import image_url, resolve_app_url
from ttframe.render.templating import render_template

LEGACY_FRAME_VERSION = "vNext"
LEGACY_ASPECT_RATIO = "1.91:1"


def page_title(summary: TradeSummary, app_name: str) -> str:
    return f"{app_name} Trade Review - {summary.pair}"


def page_description(summary: TradeSummary) -> str:
    return (
        f"Pair: {summary.pair} | PnL: {format_signed_pnl(summary.pnl)} "
        f"| Strategy: {summary.strategy}"
    )


def render_preview_page(
    summary: TradeSummary,
    base_url: str,
    options: PageOptions | None = None,
    settings: Settings | None = None,
    *,
    clock: Callable[[], float] = time.time,
) -> str:
    """Render the preview page for one summary.

    ``options.variant`` picks the embed JSON tags, the legacy ``fc:frame:*``
    tags, or both. Open Graph and Twitter tags are always present, and the
    body carries a plain summary for clients that ignore metadata.
    """

    options = options or PageOptions()
    settings = settings or Settings()
    app_url = resolve_app_url(base_url, settings)
    diary_id = default_diary_id(summary, clock)
    summary_image = image_url(base_url, summary, options.image_path)

    embed_json = None
    if options.variant.emits_embed_json:
        descriptor = build_embed_descriptor(
            summary,
            base_url,
            settings,
            image_path=options.image_path,
            diary_id=diary_id,
        )
        embed_json = descriptor.to_json()

    return render_template(
        "preview_page.html.j2",
        summary=summary,
        title=page_title(summary, settings.app_name),
        description=page_description(summary),
        app_name=settings.app_name,
        image_url=summary_image,
        page_url=f"{base_url}{options.page_path}",
        page_path=options.page_path,
        app_url=app_url,
        embed_json=embed_json,
        legacy_tags=options.variant.emits_legacy_tags,
        legacy_version=LEGACY_FRAME_VERSION,
        legacy_aspect_ratio=LEGACY_ASPECT_RATIO,
        button_title=settings.button_title,
        button_target=options.button_target_url or app_url,
        include_redirect_script=options.include_redirect_script,
        diary_id=diary_id,
    )

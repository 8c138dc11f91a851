"""Document metadata updates for pages opened with ``frame=true``.

The document is reached only through :class:`MetadataSurface`, so the same
logic drives a browser bridge, a server-side HTML rewrite or a test double.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from ttframe.core.config import Settings
from ttframe.ingest.normalizer import normalize
from ttframe.render.embed import build_embed_descriptor
from ttframe.render.links import diary_deep_link, image_url, resolve_app_url
from ttframe.render.page import page_description, page_title

logger = logging.getLogger(__name__)

FRAME_FLAG = "frame"


class MetadataSurface(Protocol):
    title: str

    def get_meta(self, attribute: str, key: str) -> str | None: ...

    def set_meta(self, attribute: str, key: str, content: str) -> bool: ...


@dataclass(slots=True)
class InMemoryMetadataSurface:
    """Dictionary-backed surface keyed by ``(attribute, key)``, e.g. ``("property", "og:title")``."""

    title: str = ""
    tags: dict[tuple[str, str], str] = field(default_factory=dict)

    def get_meta(self, attribute: str, key: str) -> str | None:
        return self.tags.get((attribute, key))

    def set_meta(self, attribute: str, key: str, content: str) -> bool:
        # Only existing tags are updated; the page template decides which tags exist.
        if (attribute, key) not in self.tags:
            return False
        self.tags[(attribute, key)] = content
        return True


def apply_frame_query(
    query: Mapping[str, object],
    surface: MetadataSurface,
    base_url: str,
    settings: Settings | None = None,
) -> bool:
    """Rewrite title and frame/Open Graph tags when ``frame=true`` is requested.

    Returns ``True`` when the flag was present and the surface was updated.
    """

    if str(query.get(FRAME_FLAG, "")) != "true":
        return False

    settings = settings or Settings()
    summary = normalize(query)
    app_url = resolve_app_url(base_url, settings)
    summary_image = image_url(base_url, summary)
    descriptor = build_embed_descriptor(
        summary,
        base_url,
        settings,
        launch_url=diary_deep_link(app_url, summary),
        include_metadata=False,
    )
    title = page_title(summary, settings.app_name)

    surface.title = title
    updated = [
        surface.set_meta("name", "fc:miniapp", descriptor.to_json()),
        surface.set_meta("property", "og:title", title),
        surface.set_meta("property", "og:description", page_description(summary)),
        surface.set_meta("property", "og:image", summary_image),
    ]
    logger.info("frame_metadata_applied pair=%s tags_updated=%s", summary.pair, sum(updated))
    return True

"""Canonical domain types shared across the frame renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

UNKNOWN = "Unknown"


@dataclass(slots=True, frozen=True)
class TradeSummary:
    """Normalized trade record driving every rendered artifact."""

    pair: str = UNKNOWN
    pnl: float = 0.0
    strategy: str = UNKNOWN
    sentiment: str = UNKNOWN
    id: str | None = None


class FrameProtocolVariant(str, Enum):
    """Which frame metadata convention a preview page emits."""

    EMBED_JSON = "embed_json"
    LEGACY_FRAME_TAGS = "legacy_frame_tags"
    BOTH = "both"

    @property
    def emits_embed_json(self) -> bool:
        return self in (FrameProtocolVariant.EMBED_JSON, FrameProtocolVariant.BOTH)

    @property
    def emits_legacy_tags(self) -> bool:
        return self in (FrameProtocolVariant.LEGACY_FRAME_TAGS, FrameProtocolVariant.BOTH)


@dataclass(slots=True, frozen=True)
class PageOptions:
    """Per-endpoint knobs for the preview page renderer."""

    variant: FrameProtocolVariant = FrameProtocolVariant.EMBED_JSON
    include_redirect_script: bool = False
    image_path: str = "/api/frame-image"
    page_path: str = "/api/frame"
    # Legacy button target; defaults to the app URL.
    button_target_url: str | None = None

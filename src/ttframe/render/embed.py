"""Mini app embed descriptor models and builder."""

from __future__ import annotations

import time
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ttframe.core.config import Settings
from ttframe.core.types import TradeSummary
from ttframe.render.links import image_url, resolve_app_url


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class LaunchAction(_CamelModel):
    type: str = "launch_miniapp"
    url: str
    name: str
    splash_image_url: str
    splash_background_color: str


class EmbedButton(_CamelModel):
    title: str
    action: LaunchAction


class EmbedMetadata(_CamelModel):
    """Summary fields echoed back to clients that read the embed."""

    diary_id: str
    pair: str
    pnl: float
    strategy: str
    sentiment: str


class EmbedDescriptor(_CamelModel):
    """Frame embed payload placed in ``fc:miniapp`` meta tags."""

    version: str
    image_url: str
    button: EmbedButton
    metadata: EmbedMetadata | None = None

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


def default_diary_id(summary: TradeSummary, clock: Callable[[], float] = time.time) -> str:
    """Use the caller's id, else ``pair-<epoch millis>``."""
    if summary.id:
        return summary.id
    return f"{summary.pair}-{int(clock() * 1000)}"


def build_embed_descriptor(
    summary: TradeSummary,
    base_url: str,
    settings: Settings | None = None,
    *,
    image_path: str = "/api/frame-image",
    launch_url: str | None = None,
    include_metadata: bool = True,
    diary_id: str | None = None,
    clock: Callable[[], float] = time.time,
) -> EmbedDescriptor:
    """Describe the frame for ``summary`` with image and launch button."""
    settings = settings or Settings()
    metadata = None
    if include_metadata:
        metadata = EmbedMetadata(
            diary_id=diary_id or default_diary_id(summary, clock),
            pair=summary.pair,
            pnl=summary.pnl,
            strategy=summary.strategy,
            sentiment=summary.sentiment,
        )
    return EmbedDescriptor(
        version=settings.embed_version,
        image_url=image_url(base_url, summary, image_path),
        button=EmbedButton(
            title=settings.button_title,
            action=LaunchAction(
                url=launch_url or resolve_app_url(base_url, settings),
                name=settings.app_name,
                splash_image_url=f"{base_url}{settings.splash_image_path}",
                splash_background_color=settings.splash_background_color,
            ),
        ),
        metadata=metadata,
    )

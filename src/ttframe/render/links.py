"""URL builders shared by the frame renderers."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from ttframe.core.config import Settings
from ttframe.core.types import TradeSummary
from ttframe.ingest.normalizer import format_pnl_param

_LOCAL_HOSTS = ("localhost", "127.0.0.1", "[::1]")


def resolve_base_url(host: str | None, settings: Settings) -> str:
    """Return the public origin, preferring the configured one over the Host header."""
    if settings.public_base_url:
        return settings.public_base_url
    host = (host or "localhost").strip()
    if host.startswith("["):
        hostname = host.split("]", 1)[0] + "]"
    else:
        hostname = host.split(":", 1)[0]
    scheme = "http" if hostname in _LOCAL_HOSTS else "https"
    return f"{scheme}://{host}"


def resolve_app_url(base_url: str, settings: Settings) -> str:
    return settings.app_url or base_url


def summary_query(summary: TradeSummary) -> str:
    return urlencode(
        {
            "pair": summary.pair,
            "pnl": format_pnl_param(summary.pnl),
            "strategy": summary.strategy,
            "sentiment": summary.sentiment,
        },
        quote_via=quote,
        safe="",
    )


def image_url(base_url: str, summary: TradeSummary, image_path: str = "/api/frame-image") -> str:
    return f"{base_url}{image_path}?{summary_query(summary)}"


def diary_deep_link(app_url: str, summary: TradeSummary) -> str:
    """Mini app landing URL that opens the diary entry for ``summary``."""
    query = urlencode(
        {
            "diary": summary.pair,
            "pnl": format_pnl_param(summary.pnl),
            "strategy": summary.strategy,
            "sentiment": summary.sentiment,
        },
        quote_via=quote,
        safe="",
    )
    return f"{app_url}/?{query}"

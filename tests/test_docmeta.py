import json

from ttframe.docmeta.applier import InMemoryMetadataSurface, apply_frame_query

BASE_URL = "https://frames.example"


def _surface() -> InMemoryMetadataSurface:
    return InMemoryMetadataSurface(
        title="ThunderTrack",
        tags={
            ("name", "fc:miniapp"): "{}",
            ("property", "og:title"): "ThunderTrack",
            ("property", "og:description"): "",
        },
    )


def test_apply_frame_query_ignores_pages_without_flag() -> None:
    surface = _surface()

    applied = apply_frame_query({"pair": "BTC/USDT"}, surface, BASE_URL)

    assert applied is False
    assert surface.title == "ThunderTrack"
    assert surface.get_meta("name", "fc:miniapp") == "{}"


def test_apply_frame_query_updates_existing_tags_only() -> None:
    surface = _surface()
    query = {"frame": "true", "pair": "BTC/USDT", "pnl": "-2", "strategy": "Breakout", "sentiment": "Calm"}

    applied = apply_frame_query(query, surface, BASE_URL)

    assert applied is True
    assert surface.title == "ThunderTrack Trade Review - BTC/USDT"
    assert surface.get_meta("property", "og:title") == "ThunderTrack Trade Review - BTC/USDT"
    assert surface.get_meta("property", "og:description") == "Pair: BTC/USDT | PnL: $-2.00 | Strategy: Breakout"
    # og:image was never on the page, so it is not created.
    assert surface.get_meta("property", "og:image") is None

    embed = json.loads(surface.get_meta("name", "fc:miniapp") or "")
    assert "metadata" not in embed
    assert embed["imageUrl"].startswith(f"{BASE_URL}/api/frame-image?pair=BTC%2FUSDT")
    assert embed["button"]["action"]["url"] == (
        f"{BASE_URL}/?diary=BTC%2FUSDT&pnl=-2&strategy=Breakout&sentiment=Calm"
    )


def test_apply_frame_query_rewrites_existing_og_image() -> None:
    surface = _surface()
    surface.tags[("property", "og:image")] = "https://frames.example/frame-image.svg"

    applied = apply_frame_query({"frame": "true", "pair": "ETH/USDT", "pnl": "3"}, surface, BASE_URL)

    assert applied is True
    assert surface.get_meta("property", "og:image") == (
        f"{BASE_URL}/api/frame-image?pair=ETH%2FUSDT&pnl=3&strategy=Unknown&sentiment=Unknown"
    )

import json
from pathlib import Path
from urllib.parse import parse_qs, urlsplit

from jsonschema import Draft202012Validator

from ttframe.core.config import Settings
from ttframe.core.types import TradeSummary
from ttframe.ingest.normalizer import normalize
from ttframe.render.embed import build_embed_descriptor, default_diary_id

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "docs/contracts/embed_descriptor.schema.json"
BASE_URL = "https://frames.example"


def _validator() -> Draft202012Validator:
    return Draft202012Validator(json.loads(SCHEMA_PATH.read_text(encoding="utf-8")))


def test_descriptor_matches_contract() -> None:
    summary = normalize({"pair": "BTC/USDT", "pnl": "125.5", "strategy": "Scalping", "sentiment": "Confident"})
    payload = build_embed_descriptor(summary, BASE_URL, Settings(), clock=lambda: 1700000000.0).to_payload()

    errors = sorted(_validator().iter_errors(payload), key=str)
    assert errors == []
    assert payload["version"] == "1"
    assert payload["button"]["action"]["type"] == "launch_miniapp"
    assert payload["button"]["action"]["url"] == BASE_URL
    assert payload["button"]["action"]["splashImageUrl"] == f"{BASE_URL}/icons/Icon-192.png"
    assert payload["button"]["action"]["splashBackgroundColor"] == "#1a1a2e"
    assert payload["metadata"]["diaryId"] == "BTC/USDT-1700000000000"


def test_descriptor_json_round_trips_metadata() -> None:
    summary = TradeSummary(pair="SOL/USDT", pnl=-3.5, strategy="Swing & Hold", sentiment="Calm", id="d-1")

    decoded = json.loads(build_embed_descriptor(summary, BASE_URL).to_json())

    assert decoded["metadata"] == {
        "diaryId": "d-1",
        "pair": "SOL/USDT",
        "pnl": -3.5,
        "strategy": "Swing & Hold",
        "sentiment": "Calm",
    }


def test_image_url_round_trips_summary_fields() -> None:
    summary = TradeSummary(pair="BTC/USDT", pnl=7.0, strategy="Mean Reversion", sentiment="Ok?")

    image_url = build_embed_descriptor(summary, BASE_URL).image_url
    parts = urlsplit(image_url)
    query = parse_qs(parts.query)

    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == f"{BASE_URL}/api/frame-image"
    assert query == {
        "pair": ["BTC/USDT"],
        "pnl": ["7"],
        "strategy": ["Mean Reversion"],
        "sentiment": ["Ok?"],
    }
    assert normalize({key: values[0] for key, values in query.items()}) == summary


def test_descriptor_uses_settings_overrides() -> None:
    settings = Settings(
        app_name="Journal",
        app_url="https://app.example/",
        button_title="Open",
        splash_background_color="#000000",
    )

    descriptor = build_embed_descriptor(TradeSummary(), BASE_URL, settings, include_metadata=False)
    payload = descriptor.to_payload()

    assert "metadata" not in payload
    assert payload["button"]["title"] == "Open"
    assert payload["button"]["action"]["name"] == "Journal"
    assert payload["button"]["action"]["url"] == "https://app.example"


def test_default_diary_id_prefers_summary_id() -> None:
    assert default_diary_id(TradeSummary(id="abc"), clock=lambda: 1.0) == "abc"
    assert default_diary_id(TradeSummary(pair="X"), clock=lambda: 1.5) == "X-1500"

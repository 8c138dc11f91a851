"""Query normalization into trade summaries."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping

from ttframe.core.types import UNKNOWN, TradeSummary

logger = logging.getLogger(__name__)

POSITIVE_COLOR = "#00ff88"
NEGATIVE_COLOR = "#ff4757"

# Leading decimal literal, matched the way browsers' parseFloat reads a prefix.
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
# Code points XML 1.0 forbids; they would make SVG output unparseable.
_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def strip_xml_invalid(text: str) -> str:
    return _XML_INVALID_CHARS.sub("", text)


def parse_float_or_zero(raw: object) -> float:
    """Parse the leading number of ``raw``; return 0.0 for anything unusable."""
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _FLOAT_PREFIX.match(str(raw).lstrip())
        if match is None:
            logger.debug("pnl_coerced_to_zero raw=%r", raw)
            return 0.0
        try:
            value = float(match.group(0))
        except (OverflowError, ValueError):
            return 0.0
    if not math.isfinite(value):
        logger.debug("pnl_coerced_to_zero raw=%r", raw)
        return 0.0
    # Collapse negative zero so sign rules treat it as non-negative.
    return value + 0.0


def _text_or_default(raw: object) -> str:
    if raw is None:
        return UNKNOWN
    text = strip_xml_invalid(str(raw)).strip()
    return text or UNKNOWN


def normalize(raw_query: Mapping[str, object]) -> TradeSummary:
    """Build a fully-populated summary from untrusted query values.

    Missing or blank display fields become ``"Unknown"`` and ``pnl`` falls back
    to ``0`` whenever it cannot be read as a finite number. Never raises.
    """

    diary_id = raw_query.get("id")
    diary_id_text = strip_xml_invalid(str(diary_id)).strip() if diary_id is not None else ""
    return TradeSummary(
        pair=_text_or_default(raw_query.get("pair")),
        pnl=parse_float_or_zero(raw_query.get("pnl")),
        strategy=_text_or_default(raw_query.get("strategy")),
        sentiment=_text_or_default(raw_query.get("sentiment")),
        id=diary_id_text or None,
    )


def pnl_color(pnl: float) -> str:
    return POSITIVE_COLOR if pnl >= 0 else NEGATIVE_COLOR


def format_signed_pnl(pnl: float) -> str:
    """Render pnl as ``+$7.00`` for non-negative values and ``$-3.50`` otherwise."""
    sign = "+" if pnl >= 0 else ""
    return f"{sign}${pnl:.2f}"


def format_pnl_param(pnl: float) -> str:
    """Shortest query-string form of pnl that parses back to the same float."""
    text = repr(pnl)
    if text.endswith(".0"):
        return text[:-2]
    return text

"""Query ingestion and normalization."""

from ttframe.ingest.normalizer import format_signed_pnl, normalize, parse_float_or_zero, pnl_color

__all__ = ["format_signed_pnl", "normalize", "parse_float_or_zero", "pnl_color"]

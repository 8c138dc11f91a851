"""Apply trade summaries to a live document's metadata."""

from ttframe.docmeta.applier import InMemoryMetadataSurface, MetadataSurface, apply_frame_query

__all__ = ["InMemoryMetadataSurface", "MetadataSurface", "apply_frame_query"]

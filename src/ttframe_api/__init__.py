"""HTTP surface for the frame renderers."""

"""Small pure helpers shared by the base layer."""

from .timestamps import iso_from_millis, iso_now, render_timestamp

__all__ = ["iso_from_millis", "iso_now", "render_timestamp"]

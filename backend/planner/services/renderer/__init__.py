"""Itinerary Renderer — markdown output."""

from .service import group_days_by_city, render_day, render_itinerary_markdown

__all__ = ["group_days_by_city", "render_day", "render_itinerary_markdown"]

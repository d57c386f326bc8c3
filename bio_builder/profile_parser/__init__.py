"""Physician profile parser package."""
from __future__ import annotations

from . import fields, headings, identity, layout, lines, locations, parser, renderer, sources
from .locations import LocationRecord
from .parser import PhysicianRecord, parse_profile_text

__all__ = [
    "fields",
    "headings",
    "identity",
    "layout",
    "lines",
    "locations",
    "parser",
    "renderer",
    "sources",
    "LocationRecord",
    "PhysicianRecord",
    "parse_profile_text",
]

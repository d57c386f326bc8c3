"""Page geometry for the printable preview.

Pages are US letter in points with half-inch margins; rendered heights are in
CSS pixels, so a page's usable height in pixels depends on the rendered width.
"""
from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

PAGE_WIDTH_PT = 612
PAGE_HEIGHT_PT = 792
MARGIN_PT = 36
USABLE_HEIGHT_PT = PAGE_HEIGHT_PT - MARGIN_PT * 2
IMAGE_WIDTH_PT = PAGE_WIDTH_PT - MARGIN_PT * 2

# How far below a new page top a pushed section lands.
SECTION_PUSH_PX = 60
# Sections ending this close to a boundary count as crossing it.
BOUNDARY_GUARD_PX = 10

SPILLABLE_SECTIONS = frozenset({"background"})


@dataclass(frozen=True)
class SectionBox:
    key: str
    top: float
    bottom: float
    hidden: bool = False


def page_height_px(page_width_px: float) -> float:
    if page_width_px <= 0:
        return 0.0
    return USABLE_HEIGHT_PT * page_width_px / IMAGE_WIDTH_PT


def page_guides(total_height_px: float, page_height: float) -> list[tuple[float, int]]:
    """Offsets of page boundaries inside the content, labelled from page 2."""
    if page_height <= 0:
        return []
    guides: list[tuple[float, int]] = []
    offset = page_height
    page = 2
    while offset < total_height_px:
        guides.append((offset, page))
        offset += page_height
        page += 1
    return guides


def page_count(content_height_px: float, page_height: float) -> int:
    if page_height <= 0 or content_height_px <= 0:
        return 0
    return math.ceil(content_height_px / page_height)


def section_shifts(sections: Iterable[SectionBox], page_height: float) -> dict[str, float]:
    """Extra top margin per section so none straddles a page boundary.

    Each section is measured independently against its original position.
    Hidden sections and sections allowed to spill across pages get no shift.
    """
    shifts: dict[str, float] = {}
    if page_height <= 0:
        return shifts
    for section in sections:
        if section.hidden or section.key in SPILLABLE_SECTIONS:
            continue
        start_page = math.floor(section.top / page_height)
        boundary = (start_page + 1) * page_height
        if section.bottom > boundary - BOUNDARY_GUARD_PX:
            shifts[section.key] = boundary - section.top + SECTION_PUSH_PX
    return shifts

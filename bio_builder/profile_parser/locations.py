"""Clinic location parsing."""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import asdict, dataclass

from .headings import find_last_standalone_heading
from .normalize import normalize_spaces

logger = logging.getLogger(__name__)

LOCATIONS_HEADING = "Locations"

LOCATION_SKIP_PATTERNS = (
    re.compile(r"^show more$", re.IGNORECASE),
    re.compile(r"^show less$", re.IGNORECASE),
    re.compile(r"maplibre|openstreetmap", re.IGNORECASE),
    re.compile(r"^get directions$", re.IGNORECASE),
    re.compile(r"^loading booking information complete", re.IGNORECASE),
    re.compile(r"^schedule appointment", re.IGNORECASE),
    re.compile(r"^schedule an appointment", re.IGNORECASE),
)
LOCATION_STOP_RE = re.compile(
    r"^(?:experience|expertise|education|insurance|reviews?|ratings|board certifications?)$"
    r"|^ratings & reviews",
    re.IGNORECASE,
)
CONTACT_LINE_RE = re.compile(r"^(?:phone|fax)\b", re.IGNORECASE)
PHONE_RE = re.compile(r"phone:\s*([0-9().\-\s]+)", re.IGNORECASE)
FAX_RE = re.compile(r"fax:\s*([0-9().\-\s]+)", re.IGNORECASE)
LEADING_NUMBER_RE = re.compile(r"^\d+\s+")


@dataclass(frozen=True)
class LocationRecord:
    name: str = ""
    address: str = ""
    phone: str = ""
    fax: str = ""

    def is_empty(self) -> bool:
        return not (self.name or self.address or self.phone or self.fax)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def is_contact_line(line: str) -> bool:
    return bool(CONTACT_LINE_RE.match(line or ""))


def location_block(lines: Sequence[str]) -> list[str]:
    """Lines after the last standalone ``Locations`` heading, minus map and booking chrome.

    The first ``Locations`` on a profile page is a navigation tab, so the
    last standalone occurrence is the one introducing the data.
    """
    start = find_last_standalone_heading(lines, LOCATIONS_HEADING)
    if start is None:
        return []
    block: list[str] = []
    for raw_line in lines[start + 1 :]:
        line = (raw_line or "").strip()
        if not line:
            continue
        if any(pattern.search(line) for pattern in LOCATION_SKIP_PATTERNS):
            continue
        if LOCATION_STOP_RE.search(line):
            break
        block.append(line)
    return block


def parse_location_block(block: Sequence[str]) -> list[LocationRecord]:
    locations: list[LocationRecord] = []
    index = 0
    while index < len(block):
        name = LEADING_NUMBER_RE.sub("", block[index] or "")
        address = ""
        phone = ""
        fax = ""
        if index + 1 < len(block) and not is_contact_line(block[index + 1]):
            address = block[index + 1]
            index += 2
        else:
            index += 1
        while index < len(block) and is_contact_line(block[index]):
            line = block[index]
            phone_match = PHONE_RE.search(line)
            if phone_match:
                phone = phone_match.group(1).strip()
            fax_match = FAX_RE.search(line)
            if fax_match:
                fax = fax_match.group(1).strip()
            index += 1
        record = LocationRecord(
            name=normalize_spaces(name),
            address=normalize_spaces(address),
            phone=phone,
            fax=fax,
        )
        if record.is_empty():
            logger.debug("Dropping empty location entry at line %d", index)
            continue
        locations.append(record)
    return locations


def parse_locations(lines: Sequence[str]) -> list[LocationRecord]:
    return parse_location_block(location_block(lines))

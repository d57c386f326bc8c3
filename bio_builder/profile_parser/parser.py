"""Assemble a physician profile record from pasted page text."""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from . import fields
from .headings import extract_heading_block, find_heading
from .identity import find_identity
from .lines import split_lines
from .locations import LocationRecord, parse_locations

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_CHARS = 200_000


@dataclass(frozen=True)
class PhysicianRecord:
    """Structured profile extracted from a single pasted page."""

    name: str = ""
    credentials: str = ""
    specialty: str = ""
    affiliations: str = ""
    languages: str = ""
    gender: str = ""
    academic_title: str = ""
    background: str = ""
    titles: tuple[str, ...] = ()
    education: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()
    memberships: tuple[str, ...] = ()
    locations: tuple[LocationRecord, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "credentials": self.credentials,
            "specialty": self.specialty,
            "affiliations": self.affiliations,
            "languages": self.languages,
            "gender": self.gender,
            "academic_title": self.academic_title,
            "background": self.background,
            "titles": list(self.titles),
            "education": list(self.education),
            "certifications": list(self.certifications),
            "memberships": list(self.memberships),
            "locations": [location.to_dict() for location in self.locations],
        }


def resolve_max_input_chars(value: int | None) -> int:
    if value is not None:
        return max(value, 0)
    env_value = os.environ.get("BIO_MAX_INPUT_CHARS")
    if env_value:
        try:
            return max(int(env_value), 0)
        except ValueError:
            logger.debug("Invalid BIO_MAX_INPUT_CHARS value: %s", env_value)
    return DEFAULT_MAX_INPUT_CHARS


def bound_input(text: str, max_chars: int | None = None) -> str:
    limit = resolve_max_input_chars(max_chars)
    if limit and len(text) > limit:
        logger.warning("Input truncated from %d to %d characters", len(text), limit)
        return text[:limit]
    return text


def _section_block(lines: Sequence[str], headings: Iterable[str]) -> tuple[str, list[str]] | None:
    index = find_heading(lines, headings)
    if index is None:
        return None
    return lines[index], extract_heading_block(lines, index)


def _languages(lines: Sequence[str]) -> str:
    section = _section_block(lines, ["Languages", "Language"])
    if section is None:
        return ""
    heading_line, block = section
    raw = fields.join_block(block).strip() or fields.text_after_colon(heading_line)
    return fields.parse_languages(raw)


def _single_value(lines: Sequence[str], headings: Iterable[str]) -> str:
    section = _section_block(lines, headings)
    if section is None:
        return ""
    heading_line, block = section
    return fields.first_value(block, heading_line)


def _academic_title(lines: Sequence[str]) -> str:
    section = _section_block(lines, ["Primary Academic Title"])
    if section is None:
        logger.debug("No academic title heading; falling back to professor lines")
        return fields.find_academic_title_fallback(lines)
    heading_line, block = section
    return fields.first_value(block, heading_line)


def _background(lines: Sequence[str]) -> str:
    section = _section_block(lines, ["Background"])
    if section is None:
        section = _section_block(lines, ["About"])
    if section is None:
        return ""
    return fields.join_block(section[1])


def _list_section(
    lines: Sequence[str], headings: Iterable[str], *, paired: bool = False
) -> tuple[str, ...]:
    section = _section_block(lines, headings)
    if section is None:
        return ()
    block = section[1]
    return tuple(fields.parse_pairs(block) if paired else fields.parse_list(block))


def parse_lines(lines: Sequence[str]) -> PhysicianRecord:
    identity = find_identity(lines)
    return PhysicianRecord(
        name=identity.name,
        credentials=identity.credentials,
        specialty=identity.specialty,
        affiliations=fields.find_affiliations(lines),
        languages=_languages(lines),
        gender=_single_value(lines, ["Gender"]),
        academic_title=_academic_title(lines),
        background=_background(lines),
        titles=_list_section(lines, ["Professional Titles"]),
        education=_list_section(lines, ["Education"], paired=True),
        certifications=_list_section(
            lines, ["Board Certifications", "Board Certification"], paired=True
        ),
        memberships=_list_section(lines, ["Memberships", "Membership"]),
        locations=tuple(parse_locations(lines)),
    )


def parse_profile_text(text: str) -> PhysicianRecord:
    """Parse pasted profile page text into a :class:`PhysicianRecord`.

    Never raises on odd input; fields that cannot be found are left empty.
    """
    lines = split_lines(text)
    record = parse_lines(lines)
    logger.debug(
        "Parsed %d lines: name=%r, %d locations", len(lines), record.name, len(record.locations)
    )
    return record

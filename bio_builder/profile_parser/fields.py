"""Converters from a section block to a typed field value."""
from __future__ import annotations

import re
from collections.abc import Sequence

from .normalize import dedupe, normalize_spaces, title_case

PAIR_SEPARATOR = " — "

LEADING_BULLET_RE = re.compile(r"^•\s*")
LANGUAGE_GLUE_RE = re.compile(r"([a-z])([A-Z])")
LANGUAGE_SPLIT_RE = re.compile(r"[,/;| ]+")
AFFILIATIONS_RE = re.compile(r"(?:Johns Hopkins|Hospital) Affiliations:?(.+)?", re.IGNORECASE)
ACADEMIC_TITLE_RE = re.compile(r"Professor|Associate Professor|Assistant Professor", re.IGNORECASE)
BRAND_RE = re.compile(r"johns hopkins medicine", re.IGNORECASE)

ACADEMIC_TITLE_MAX_LENGTH = 160


def join_block(block: Sequence[str]) -> str:
    return " ".join(normalize_spaces(line) for line in block)


def text_after_colon(heading_line: str) -> str:
    parts = (heading_line or "").split(":")
    return parts[1].strip() if len(parts) > 1 else ""


def first_value(block: Sequence[str], heading_line: str = "") -> str:
    """First line of the block, or the inline value of ``Heading: value``."""
    for line in block:
        value = normalize_spaces(line)
        if value:
            return value
    return text_after_colon(heading_line)


def parse_list(block: Sequence[str]) -> list[str]:
    items: list[str] = []
    for line in block:
        value = LEADING_BULLET_RE.sub("", normalize_spaces(line)).strip()
        if value:
            items.append(value)
    return items


def parse_pairs(block: Sequence[str]) -> list[str]:
    """Pair consecutive lines as ``institution — detail``.

    Source pages alternate the institution and the degree or board on
    separate lines. A trailing unpaired line is kept on its own.
    """
    items: list[str] = []
    for index in range(0, len(block), 2):
        first = normalize_spaces(block[index])
        second = normalize_spaces(block[index + 1]) if index + 1 < len(block) else ""
        if not first and not second:
            continue
        if first and second:
            items.append(f"{first}{PAIR_SEPARATOR}{second}")
        else:
            items.append(first or second)
    return items


def parse_languages(value: str) -> str:
    """Turn ``"BengaliEnglish"`` style text into ``"Bengali, English"``."""
    text = normalize_spaces(value).replace("•", " ").strip()
    text = LANGUAGE_GLUE_RE.sub(r"\1,\2", text)
    parts = [part.strip() for part in LANGUAGE_SPLIT_RE.split(text) if part.strip()]
    return ", ".join(dedupe(title_case(part) for part in parts))


def find_affiliations(lines: Sequence[str]) -> str:
    for index, line in enumerate(lines):
        match = AFFILIATIONS_RE.search(line)
        if not match:
            continue
        value = normalize_spaces(match.group(1) or "")
        if not value and index + 1 < len(lines):
            value = normalize_spaces(lines[index + 1])
        return value
    return ""


def find_academic_title_fallback(lines: Sequence[str]) -> str:
    for line in lines:
        if (
            ACADEMIC_TITLE_RE.search(line)
            and len(line) < ACADEMIC_TITLE_MAX_LENGTH
            and not BRAND_RE.search(line)
        ):
            return normalize_spaces(line)
    return ""

"""Split pasted page text into ordered, trimmed lines."""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

LINE_SEPARATOR_RE = re.compile("[\u2028\u2029]")

# Headings a flattened single-line paste is split on.
BLOB_HEADING_RE = re.compile(
    r"(Johns Hopkins Medicine|Back to search|Share:|Print|Locations|Languages|Gender"
    r"|Education|Background|Board Certifications?|Memberships?|Professional Titles?"
    r"|Primary Academic Title)"
)

UI_ARTIFACT_RE = re.compile(r"^show (?:more|less)$", re.IGNORECASE)


def clean_text(text: str | None) -> str:
    return (text or "").replace("\r", "").replace("\t", " ").strip()


def inject_heading_breaks(text: str) -> str:
    """Insert a newline before each known heading of a newline-free blob."""
    if "\n" in text:
        return text
    return BLOB_HEADING_RE.sub(lambda match: "\n" + match.group(1), text)


def split_lines(text: str | None) -> list[str]:
    cleaned = LINE_SEPARATOR_RE.sub("\n", clean_text(text))
    if cleaned and "\n" not in cleaned:
        logger.debug("Input has no line breaks; splitting on known headings")
        cleaned = inject_heading_breaks(cleaned)
    lines: list[str] = []
    for raw_line in cleaned.split("\n"):
        line = raw_line.strip()
        if not line or UI_ARTIFACT_RE.match(line):
            continue
        lines.append(line)
    return lines

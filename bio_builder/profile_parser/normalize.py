"""Normalization helpers."""
from __future__ import annotations

import re
from collections.abc import Iterable

WHITESPACE_RE = re.compile(r"\s+")
WORD_RE = re.compile(r"\w\S*")
BULLET_CHARS_RE = re.compile(r"[•·]")
GLUED_CASE_RE = re.compile(r"([a-z)])([A-Z])")

SPECIALTY_SEPARATOR = " • "


def normalize_spaces(value: str) -> str:
    return WHITESPACE_RE.sub(" ", value or "").strip()


def normalize_key(value: str) -> str:
    return " ".join(value.lower().strip().split())


def title_case(value: str) -> str:
    """Upper-case the first character of every word, leaving the rest untouched."""
    return WORD_RE.sub(lambda match: match.group(0)[:1].upper() + match.group(0)[1:], value)


def dedupe(values: Iterable[str]) -> list[str]:
    seen = set()
    result: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def fix_specialty_formatting(value: str) -> str:
    """Re-insert bullets into specialty text whose separators were stripped.

    ``"Spine SurgeryNeurosurgery"`` becomes ``"Spine Surgery • Neurosurgery"``.
    Text that already carries a bullet glyph is returned trimmed but otherwise
    unchanged.
    """
    if not value:
        return ""
    out = value.strip()
    if BULLET_CHARS_RE.search(out):
        return out
    out = GLUED_CASE_RE.sub(rf"\1{SPECIALTY_SEPARATOR}\2", out)
    return WHITESPACE_RE.sub(" ", out)

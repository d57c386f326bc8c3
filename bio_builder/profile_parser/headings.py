"""Section heading vocabulary and block extraction."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

# Any line starting with one of these (case-insensitive) opens a new section.
GLOBAL_STOP_HEADINGS: tuple[str, ...] = (
    # profile structure
    "languages",
    "language",
    "gender",
    "professional titles",
    "primary academic title",
    "about",
    "background",
    "education",
    "board certifications",
    "board certification",
    "memberships",
    "membership",
    "videos",
    "selected publications",
    "locations",
    "experience",
    "expertise",
    "conditions treated",
    "treatments & procedures",
    "treatments and procedures",
    "procedures",
    "in-network plans",
    "age groups seen",
    "insurance",
    "ratings & reviews",
    "ratings",
    "reviews",
    "graduate program affiliations",
    "linkedin",
    "professional activities",
    # research
    "clinical trial keywords",
    "clinical trials summary",
    "research interests",
    "lab website",
    "contact for research inquiries",
    "find a clinical trial",
    # institutional sections never wanted inside a block
    "centers and institutes",
    "recent news articles and media coverage",
    "additional academic titles",
    "x (twitter)",
    "twitter",
    # footer and page chrome
    "schedule appointment",
    "schedule an appointment",
    "language assistance available",
    "contact & privacy information",
    "price transparency",
    "terms & conditions of use",
    "non-discrimination notice",
    "follow on facebook",
    "follow on twitter",
    "follow on linkedin",
    "follow on instagram",
    "follow on youtube",
    "follow on weibo",
)


def _lowered(headings: Iterable[str]) -> tuple[str, ...]:
    return tuple(heading.lower() for heading in headings if heading)


def starts_with_heading(line: str, headings: Iterable[str]) -> bool:
    lowered = (line or "").lower()
    return any(lowered.startswith(heading) for heading in headings)


def find_heading(lines: Sequence[str], heading_variants: Iterable[str]) -> int | None:
    """Return the index of the first line starting with any variant, else ``None``."""
    keys = _lowered(heading_variants)
    for index, line in enumerate(lines):
        if starts_with_heading(line, keys):
            return index
    return None


def extract_heading_block(
    lines: Sequence[str],
    start_index: int,
    extra_stop_headings: Iterable[str] = (),
) -> list[str]:
    """Collect the lines after ``start_index`` up to the next known heading.

    The stop list is the global vocabulary plus ``extra_stop_headings``, so a
    block never runs into another recognised section even when that section
    is not the one being looked for.
    """
    stops = GLOBAL_STOP_HEADINGS + _lowered(extra_stop_headings)
    block: list[str] = []
    for line in lines[start_index + 1 :]:
        if starts_with_heading(line, stops):
            break
        block.append(line)
    return block


def find_last_standalone_heading(lines: Sequence[str], heading: str) -> int | None:
    """Index of the last line equal to ``heading`` (case-insensitive)."""
    target = heading.strip().lower()
    found: int | None = None
    for index, line in enumerate(lines):
        if (line or "").strip().lower() == target:
            found = index
    return found

"""Markdown preview of a parsed profile."""
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .locations import LocationRecord
from .parser import PhysicianRecord

PLACEHOLDER = "—"
NAME_PLACEHOLDER = "Physician Name"
SPECIALTY_PLACEHOLDER = "Specialty"
LOCATION_PLACEHOLDER = "Location"
INDENT = "    "


def is_empty_value(value: str | Sequence[str] | Sequence[LocationRecord]) -> bool:
    """Whether a preview field counts as empty for auto-hiding."""
    if isinstance(value, str):
        text = value.strip()
        return not text or text == PLACEHOLDER
    items = list(value)
    if not items:
        return True
    return len(items) == 1 and isinstance(items[0], str) and items[0].strip() == PLACEHOLDER


def display_name(record: PhysicianRecord) -> str:
    name = record.name.strip()
    if not name:
        return NAME_PLACEHOLDER
    credentials = record.credentials.strip()
    return f"{name}, {credentials}" if credentials else name


def render_location(index: int, location: LocationRecord) -> list[str]:
    lines = [f"**{index}. {location.name.strip() or LOCATION_PLACEHOLDER}**"]
    if location.address.strip():
        lines.append(f"{INDENT}{location.address.strip()}")
    contact = []
    if location.phone.strip():
        contact.append("Phone: " + location.phone.strip())
    if location.fax.strip():
        contact.append("Fax: " + location.fax.strip())
    if contact:
        lines.append(INDENT + " • ".join(contact))
    return lines


def _section(label: str, body: list[str]) -> list[str]:
    return [f"## {label}", "", *body, ""]


def render_preview(record: PhysicianRecord) -> str:
    lines = [f"# {display_name(record)}", "", record.specialty.strip() or SPECIALTY_PLACEHOLDER, ""]
    text_fields = [
        ("Affiliations", record.affiliations),
        ("Languages", record.languages),
        ("Gender", record.gender),
    ]
    for label, value in text_fields:
        if not is_empty_value(value):
            lines.extend(_section(label, [value.strip()]))
    if not is_empty_value(record.titles):
        lines.extend(_section("Professional Titles", [f"- {item}" for item in record.titles]))
    if not is_empty_value(record.academic_title):
        lines.extend(_section("Primary Academic Title", [record.academic_title.strip()]))
    list_fields = [
        ("Education", record.education),
        ("Board Certifications", record.certifications),
        ("Memberships", record.memberships),
    ]
    for label, items in list_fields:
        if not is_empty_value(items):
            lines.extend(_section(label, [f"- {item}" for item in items]))
    if not is_empty_value(record.locations):
        body: list[str] = []
        for index, location in enumerate(record.locations, start=1):
            if body:
                body.append("")
            body.extend(render_location(index, location))
        lines.extend(_section("Locations", body))
    # Background is always shown, even when empty.
    lines.extend(_section("Background", [record.background.strip() or PLACEHOLDER]))
    return "\n".join(lines).rstrip() + "\n"


def write_preview(record: PhysicianRecord, output_path: Path) -> str:
    content = render_preview(record)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return content

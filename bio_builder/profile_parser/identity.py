"""Name, credential and specialty detection for the top of a profile page.

The header block of a profile has no reliable heading, so detection runs a
ranked chain of strategies. Each strategy is a plain function taking the
normalized lines and returning an :class:`IdentityMatch` or ``None``:

1. ``structured_header``: the first name-shaped line within the top of the
   page (after the ``Print`` page-chrome marker when there is one), an optional ``"Name, Credentials"`` line and the
   first usable specialty line below it.
2. ``comma_credentials``: a ``"First Last, MD"`` line near the top of the page.
3. ``whole_text``: a ``"First Last, DEGREE"`` match anywhere in the text.
4. ``name_shape``: the first name-shaped line anywhere.

The first strategy yielding a name wins. Later strategies only fill in an
empty credentials or specialty value, and only when they agree on the name.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from .normalize import fix_specialty_formatting, normalize_key

logger = logging.getLogger(__name__)

HEADER_SCAN_LINES = 12
SPECIALTY_LOOKAHEAD = 8
SPECIALTY_MAX_LENGTH = 200
COMMA_SCAN_LINES = 80

PRINT_MARKER_RE = re.compile(r"^Print$", re.IGNORECASE)
BRAND_RE = re.compile(r"johns hopkins medicine", re.IGNORECASE)
BRAND_MENTION_RE = re.compile(r"johns hopkins", re.IGNORECASE)
SEARCH_CHROME_RE = re.compile(r"back to search|new search|search\]", re.IGNORECASE)

NAME_REJECT_PATTERNS = (
    BRAND_RE,
    re.compile(r"loading complete", re.IGNORECASE),
    re.compile(r"accepting new patients", re.IGNORECASE),
    re.compile(r"out of 5 stars", re.IGNORECASE),
    re.compile(r"ratings?", re.IGNORECASE),
)
NAME_WORD_RE = re.compile(r"^[A-Z][a-zA-Z.'-]+$")
# "deBettencourt", "vanHouten"
PREFIXED_NAME_WORD_RE = re.compile(r"^[a-z]{1,3}[A-Z][a-zA-Z.'-]+$")
NAME_MIN_WORDS = 2
NAME_MAX_WORDS = 6

SPECIALTY_NOISE_PATTERNS = (
    re.compile(r"Accepting New Patients", re.IGNORECASE),
    re.compile(r"Online Booking", re.IGNORECASE),
    re.compile(r"out of 5 stars?", re.IGNORECASE),
    re.compile(r"ratings|reviews", re.IGNORECASE),
    re.compile(r"Highlights|Age Groups Seen|Languages|In-Network Plans", re.IGNORECASE),
)

CREDENTIAL_LINE_RE = re.compile(r"^(.+?),\s*(.+)$")
NAME_WITH_CREDENTIALS_RE = re.compile(
    r"^([A-Z][A-Za-z.'-]+(?:\s+[A-Z][A-Za-z.'-]+)*(?:\s+(Jr\.?|Sr\.?|II|III|IV|V))?),\s*(.+)$"
)

CREDENTIAL_TOKENS: tuple[str, ...] = (
    # physician degrees
    "MD", "DO", "MBBS", "MBBCh", "MBBChBAO", "BMBCh", "BM BCh", "MBChB",
    # dentistry and pharmacy
    "DDS", "DMD", "PharmD",
    # doctoral, research and public health
    "PhD", "ScD", "DrPH", "DPH",
    # veterinary
    "DVM", "VMD", "VetMB",
    # law, business and administration
    "JD", "MBA", "MPA", "MSHA",
    # master's degrees
    "MA", "MS", "MSc", "MSE", "MAS", "MEd", "MHS", "MPhil", "M Math", "SM", "ScM",
    "AM", "Laurea", "Master of Biotechnology", "MSCE", "MSCI",
    "MPH", "MSPH", "MHSc",
    # nursing and advanced practice
    "DNP", "CNM", "CRNP", "NP", "CNP", "FNP", "APRN",
    # rehabilitation and therapy
    "DPT", "MPT", "OTD", "OT", "SLP",
    # vision and podiatry
    "OD", "DPM",
    # genetics, counseling, informatics, nutrition
    "MGC", "MSW", "MBE", "MBI", "RD",
    # fellowships
    "FACC", "FSCAI",
    "AuD",
)
CREDENTIAL_TOKEN_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(token) for token in CREDENTIAL_TOKENS) + r")\b"
)

WHOLE_TEXT_NAME_RE = re.compile(
    r"([A-Z][a-zA-Z.'-]+(?:\s+[A-Z][a-zA-Z.'-]+){1,3}),\s*"
    r"(MD|DO|PhD|MBBS|BMBCh|BM BCh|FACC|FSCAI|MBA|MPH|MS|CRNP|NP|CNP|FNP|DNP|PA-C|AuD)"
)
LEADING_COMMA_RE = re.compile(r"^,\s*")


@dataclass(frozen=True)
class IdentityMatch:
    name: str = ""
    credentials: str = ""
    specialty: str = ""
    strategy: str = ""


IdentityStrategy = Callable[[Sequence[str]], IdentityMatch | None]


def is_likely_name(line: str | None) -> bool:
    text = (line or "").strip()
    if not text:
        return False
    if any(pattern.search(text) for pattern in NAME_REJECT_PATTERNS):
        return False
    words = text.split()
    if not NAME_MIN_WORDS <= len(words) <= NAME_MAX_WORDS:
        return False
    return all(NAME_WORD_RE.match(word) or PREFIXED_NAME_WORD_RE.match(word) for word in words)


def is_noise_for_specialty(line: str | None) -> bool:
    text = (line or "").strip()
    if not text:
        return True
    return any(pattern.search(text) for pattern in SPECIALTY_NOISE_PATTERNS)


def looks_like_credentials(text: str) -> bool:
    return bool(CREDENTIAL_TOKEN_RE.search(text or ""))


def split_credential_line(line: str, name: str) -> str:
    """Credentials from a ``"Owner, Credentials"`` line that belongs to ``name``.

    The owner part may repeat the full name (``"Erin Brown, MD"``) or only the
    surname (``"Brown, MD"``); anything else is not treated as credentials.
    A surname-only owner also needs a recognised degree after the comma.
    """
    match = CREDENTIAL_LINE_RE.match((line or "").strip())
    if not match or not name:
        return ""
    name_words = name.lower().split()
    owner_words = match.group(1).lower().split()
    credentials = match.group(2).strip()
    if not owner_words:
        return ""
    if owner_words[0] == name_words[0]:
        return credentials
    if owner_words[0] == name_words[-1] and looks_like_credentials(credentials):
        return credentials
    return ""


def scan_specialty(
    lines: Sequence[str],
    start: int,
    name: str,
    *,
    stop_on_colon: bool = False,
    skip: int | None = None,
) -> str:
    """First usable specialty line in the lookahead window after ``start``."""
    lowered_name = name.lower()
    end = min(start + SPECIALTY_LOOKAHEAD, len(lines))
    for index in range(start + 1, end):
        if index == skip:
            continue
        candidate = (lines[index] or "").strip()
        if is_noise_for_specialty(candidate) or BRAND_MENTION_RE.search(candidate):
            continue
        if lowered_name and lowered_name in candidate.lower():
            continue
        if ":" in candidate:
            if stop_on_colon:
                break
            continue
        if len(candidate) > SPECIALTY_MAX_LENGTH:
            continue
        return candidate
    return ""


def match_structured_header(lines: Sequence[str]) -> IdentityMatch | None:
    print_index = next(
        (index for index, line in enumerate(lines) if PRINT_MARKER_RE.match((line or "").strip())),
        None,
    )
    start = 0 if print_index is None else print_index + 1
    end = min(start + HEADER_SCAN_LINES, len(lines))
    for index in range(start, end):
        if not is_likely_name(lines[index]):
            continue
        name = lines[index].strip()
        credentials = ""
        credentials_index: int | None = None
        if index + 1 < len(lines):
            credentials = split_credential_line(lines[index + 1], name)
            if credentials:
                credentials_index = index + 1
        specialty = scan_specialty(lines, index, name, skip=credentials_index)
        return IdentityMatch(name, credentials, specialty, "structured_header")
    return None


def match_comma_credentials(lines: Sequence[str]) -> IdentityMatch | None:
    for index, raw_line in enumerate(lines[:COMMA_SCAN_LINES]):
        line = (raw_line or "").strip()
        if not line or SEARCH_CHROME_RE.search(line) or BRAND_RE.search(line):
            continue
        match = NAME_WITH_CREDENTIALS_RE.match(line)
        if not match or not looks_like_credentials(match.group(3)):
            continue
        name = match.group(1).strip()
        specialty = scan_specialty(lines, index, name, stop_on_colon=True)
        return IdentityMatch(name, match.group(3).strip(), specialty, "comma_credentials")
    return None


def match_whole_text(lines: Sequence[str]) -> IdentityMatch | None:
    match = WHOLE_TEXT_NAME_RE.search(" ".join(lines))
    if not match:
        return None
    return IdentityMatch(match.group(1).strip(), match.group(2).strip(), "", "whole_text")


def match_name_shape(lines: Sequence[str]) -> IdentityMatch | None:
    for line in lines:
        if is_likely_name(line):
            return IdentityMatch(name=line.strip(), strategy="name_shape")
    return None


IDENTITY_STRATEGIES: tuple[IdentityStrategy, ...] = (
    match_structured_header,
    match_comma_credentials,
    match_whole_text,
    match_name_shape,
)


def _is_complete(match: IdentityMatch) -> bool:
    return bool(match.name and match.credentials and match.specialty)


def _fill_gaps(current: IdentityMatch, candidate: IdentityMatch) -> IdentityMatch:
    if not current.name:
        return candidate
    if normalize_key(candidate.name) != normalize_key(current.name):
        return current
    return replace(
        current,
        credentials=current.credentials or candidate.credentials,
        specialty=current.specialty or candidate.specialty,
    )


def credentials_from_name_line(lines: Sequence[str], name: str) -> str:
    """Remainder of the first ``"<name>, ..."`` style line, used as credentials."""
    if not name:
        return ""
    for line in lines:
        if name in line and "," in line:
            return LEADING_COMMA_RE.sub("", line.replace(name, "", 1).strip()).strip()
    return ""


def find_identity(
    lines: Sequence[str],
    strategies: Sequence[IdentityStrategy] = IDENTITY_STRATEGIES,
) -> IdentityMatch:
    result = IdentityMatch()
    for strategy in strategies:
        if _is_complete(result):
            break
        candidate = strategy(lines)
        if candidate is None or not candidate.name:
            continue
        if not result.name:
            logger.debug("Identity found by %s: %s", candidate.strategy, candidate.name)
        result = _fill_gaps(result, candidate)
    if result.name and not result.credentials:
        credentials = credentials_from_name_line(lines, result.name)
        if credentials:
            result = replace(result, credentials=credentials)
    return replace(result, specialty=fix_specialty_formatting(result.specialty))

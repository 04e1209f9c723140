"""Resume section location and section-scoped extraction.

Covers education degrees, project names and total experience duration.
Skills live in skill_extractor.py because they switch between two modes.
"""

import logging
import re
from typing import NamedTuple, Optional, Sequence

from services.dedupe import dedupe_case_insensitive
from services.patterns import PATTERNS, PatternLibrary

logger = logging.getLogger(__name__)

NOT_SPECIFIED = "Not specified"


class SectionSpan(NamedTuple):
    """Body of a located section: ``text[start:end]``."""
    start: int
    end: int
    body: str


# ---------------------------------------------------------------------------
# Section location
# ---------------------------------------------------------------------------


def find_section_end(
    text: str,
    start: int,
    stops: Sequence[re.Pattern],
    *,
    stop_at_blank_line: bool = False,
    patterns: PatternLibrary = PATTERNS,
) -> int:
    """Return the index where the section starting at ``start`` ends.

    The end is the earliest of: the next stop header, a blank line (when
    ``stop_at_blank_line``), or the end of the text. Whitespace right
    after the header is skipped first so "HEADER\\n\\nbody" still has a body.
    """
    content_start = patterns.leading_whitespace.match(text, start).end()
    end = len(text)

    for stop in stops:
        match = stop.search(text, content_start)
        if match and match.start() < end:
            end = match.start()

    if stop_at_blank_line:
        match = patterns.blank_line.search(text, content_start)
        if match and match.start() < end:
            end = match.start()

    return max(end, start)


def locate_section(
    text: str,
    header: re.Pattern,
    stops: Sequence[re.Pattern],
    *,
    stop_at_blank_line: bool = False,
    patterns: PatternLibrary = PATTERNS,
) -> Optional[SectionSpan]:
    """Find the first section introduced by ``header``.

    Only the first header occurrence is used. Returns None when the header
    does not appear in the text.
    """
    match = header.search(text)
    if match is None:
        return None
    start = match.end()
    end = find_section_end(
        text, start, stops, stop_at_blank_line=stop_at_blank_line, patterns=patterns
    )
    return SectionSpan(start, end, text[start:end])


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------


def extract_education(text: str, patterns: PatternLibrary = PATTERNS) -> list[str]:
    """Degree tokens (B.Tech, MCA, Master's, PhD, ...) found anywhere in text.

    Tokens are kept as written; repeats differing only by case collapse
    onto the first occurrence.
    """
    return dedupe_case_insensitive(m.group(1) for m in patterns.degree.finditer(text))


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


def extract_projects(text: str, patterns: PatternLibrary = PATTERNS) -> list[str]:
    """Project names from "• Name Month YYYY" lines inside the PROJECTS section.

    Lines of any other shape are ignored.
    """
    section = locate_section(
        text, patterns.projects_header, (patterns.projects_stops,), patterns=patterns
    )
    if section is None:
        return []

    names = []
    for match in patterns.project_line.finditer(section.body):
        names.append(patterns.whitespace_run.sub(" ", match.group(1).strip()))
    return dedupe_case_insensitive(names)


# ---------------------------------------------------------------------------
# Experience duration
# ---------------------------------------------------------------------------


def _range_months(match: re.Match, patterns: PatternLibrary) -> int:
    """Inclusive month count of one "Month YYYY - Month YYYY" match (0 if malformed)."""
    start_month = patterns.month_numbers.get(match.group(1).lower())
    end_month = patterns.month_numbers.get(match.group(3).lower())
    if start_month is None or end_month is None:
        return 0
    start_year = int(match.group(2))
    end_year = int(match.group(4))
    return (end_year - start_year) * 12 + (end_month - start_month) + 1


def format_duration(total_months: int) -> str:
    """Render a month count as "2 years 3 months", "1 year", "5 months".

    A reversed date range can make the total negative; that renders as an
    empty string, which still counts as stated experience.
    """
    if total_months == 0:
        return NOT_SPECIFIED
    if total_months < 0:
        return ""

    years, months = divmod(total_months, 12)
    parts = []
    if years > 0:
        parts.append(f"{years} year{'s' if years > 1 else ''}")
    if months > 0:
        parts.append(f"{months} month{'s' if months > 1 else ''}")
    return " ".join(parts)


def extract_experience(text: str, patterns: PatternLibrary = PATTERNS) -> str:
    """Total experience from date ranges in the EXPERIENCE section.

    Every range is counted inclusively and summed as-is: overlapping jobs
    are counted twice.
    """
    section = locate_section(
        text, patterns.experience_header, (patterns.experience_stops,), patterns=patterns
    )
    if section is None:
        return NOT_SPECIFIED

    total_months = 0
    for match in patterns.date_range.finditer(section.body):
        total_months += _range_months(match, patterns)

    logger.debug("Experience section yielded %d months", total_months)
    return format_duration(total_months)

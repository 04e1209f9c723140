"""Skill extraction for resumes and job postings.

Two strategies, picked once per call:
1. Section mode: the text has a TECHNICAL SKILLS header, so only the
   "Category: skill, skill" lines of that section are read (resumes).
2. Free-text mode: no such header, so three scans run over the whole text
   (job postings, header-less resumes):
   - header scan: sections after "Skills:", "Tools:", "Requirements:" ...
   - dense-list scan: short lines with at least two commas
   - technical-term scan: capitalized and symbol-joined words that recur
     or look like technology names

Results are ordered by where they appear in the text and deduplicated
case-insensitively.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from operator import itemgetter
from typing import Callable, Iterable, Iterator, Optional

from services.dedupe import dedupe_case_insensitive
from services.patterns import PATTERNS, PatternLibrary
from services.section_parser import SectionSpan, find_section_end, locate_section

logger = logging.getLogger(__name__)

# (offset in source text, candidate)
Candidate = tuple[int, str]


class SkillExtractionMode(str, Enum):
    SECTION = "section"
    FREE_TEXT = "free_text"


@dataclass(frozen=True)
class ModeDecision:
    mode: SkillExtractionMode
    section: Optional[SectionSpan] = None


def detect_mode(text: str, patterns: PatternLibrary = PATTERNS) -> ModeDecision:
    """Section mode if a TECHNICAL SKILLS header exists, free-text otherwise."""
    section = locate_section(
        text,
        patterns.technical_skills_header,
        (patterns.technical_skills_stops,),
        stop_at_blank_line=True,
        patterns=patterns,
    )
    if section is None:
        return ModeDecision(SkillExtractionMode.FREE_TEXT)
    return ModeDecision(SkillExtractionMode.SECTION, section)


# ---------------------------------------------------------------------------
# Technical-term heuristics
# ---------------------------------------------------------------------------


def has_technical_pattern(term: str, patterns: PatternLibrary = PATTERNS) -> bool:
    """True for shapes that look like technology names.

    ALLCAPS (2+ letters), any digit, one of ``. # + /``, CamelCase, or a
    ``.js`` / ``sql`` / ``script`` suffix, plus the literals c++ and c#.
    """
    if not term:
        return False
    if (
        patterns.all_caps.match(term)
        or patterns.digit.search(term)
        or patterns.technical_symbol.search(term)
        or patterns.camel_case.match(term)
    ):
        return True
    lower = term.lower()
    return lower.endswith(patterns.technical_suffixes) or lower in patterns.technical_exact


def _word_frequency(text: str, patterns: PatternLibrary) -> Counter:
    return Counter(
        patterns.frequency_noise.sub("", word).lower() for word in text.split()
    )


def filter_technical_terms(
    terms: Iterable[str], text: str, patterns: PatternLibrary = PATTERNS
) -> list[str]:
    """Keep terms that occur at least twice in ``text`` or look technical."""
    frequency = _word_frequency(text, patterns)
    return [
        term for term in terms
        if frequency[term.lower()] >= patterns.min_term_frequency
        or has_technical_pattern(term, patterns)
    ]


def is_valid_skill_candidate(candidate: Optional[str], patterns: PatternLibrary = PATTERNS) -> bool:
    """Reject noise: numbers, URLs, sentences, long phrases, stray short words."""
    if candidate is None:
        return False
    text = candidate.strip()

    if not patterns.min_candidate_length <= len(text) <= patterns.max_candidate_length:
        return False
    if not patterns.has_letter.search(text):
        return False
    if patterns.numeric.match(text):
        return False
    if patterns.url.match(text):
        return False
    if patterns.sentence_boundary.search(text):
        return False
    if len(text.split()) > patterns.max_candidate_words:
        return False
    # "with", "team", "good" ... unless shaped like a technology
    if (
        patterns.bare_lowercase.match(text)
        and len(text) <= patterns.short_word_length
        and not has_technical_pattern(text, patterns)
    ):
        return False
    return True


# ---------------------------------------------------------------------------
# Candidate splitting
# ---------------------------------------------------------------------------


def _iter_lines(text: str, start: int = 0) -> Iterator[tuple[int, str]]:
    offset = start
    for line in text.split("\n"):
        yield offset, line
        offset += len(line) + 1


def _clean_candidate(item: str, patterns: PatternLibrary) -> str:
    item = item.strip()
    item = patterns.connector_prefix.sub("", item, count=1)
    item = patterns.edge_noise.sub("", item)
    return patterns.trailing_punctuation.sub("", item)


def _split_line(line: str, offset: int, patterns: PatternLibrary) -> Iterator[Candidate]:
    """Split one list-like line on ``, ; | /``.

    A leading bullet or enumerator is dropped, and for "Label: a, b" lines
    only the part after the first colon is used.
    """
    fragment = patterns.bullet_prefix.sub("", line, count=1)
    skipped = len(line) - len(fragment)
    if ":" in fragment:
        colon = fragment.index(":") + 1
        skipped += colon
        fragment = fragment[colon:]

    for match in patterns.list_item.finditer(fragment):
        item = _clean_candidate(match.group(), patterns)
        if item:
            yield offset + skipped + match.start(), item


def _scan_skill_headers(text: str, patterns: PatternLibrary) -> Iterator[Candidate]:
    for header in patterns.skill_header_line.finditer(text):
        start = header.end()
        end = find_section_end(
            text, start, (patterns.generic_header,), stop_at_blank_line=True, patterns=patterns
        )
        for offset, line in _iter_lines(text[start:end], start):
            if line.strip():
                yield from _split_line(line, offset, patterns)


def _scan_dense_lists(text: str, patterns: PatternLibrary) -> Iterator[Candidate]:
    for offset, line in _iter_lines(text):
        stripped = line.strip()
        if len(stripped) > patterns.max_list_line_length:
            continue
        if stripped.count(",") >= patterns.min_list_commas:
            yield from _split_line(line, offset, patterns)


def _scan_technical_terms(text: str, patterns: PatternLibrary) -> Iterator[Candidate]:
    first_seen: dict[str, int] = {}

    def _collect(term: str, offset: int) -> None:
        term = term.strip()
        if patterns.min_term_length <= len(term) <= patterns.max_term_length:
            first_seen.setdefault(term, offset)

    for match in patterns.capitalized_term.finditer(text):
        _collect(match.group("symbol") or match.group("word"), match.start())
    for match in patterns.joined_symbol_term.finditer(text):
        _collect(match.group(1), match.start(1))

    for term in filter_technical_terms(first_seen, text, patterns):
        yield first_seen[term], term


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def _keep_section_token(token: str, patterns: PatternLibrary) -> bool:
    # CGPA-style "9.2" values sit next to real skills in these lines
    return len(token) > 1 and not patterns.numeric.match(token)


def _extract_section_mode(
    text: str, decision: ModeDecision, patterns: PatternLibrary
) -> list[Candidate]:
    section = decision.section
    candidates: list[Candidate] = []
    for offset, line in _iter_lines(section.body, section.start):
        stripped = patterns.bullet_prefix.sub("", line.strip(), count=1)
        if ":" not in stripped:
            continue
        _, _, skills_part = stripped.partition(":")
        for token in skills_part.split(","):
            token = token.strip()
            if _keep_section_token(token, patterns):
                candidates.append((offset, token))
    return candidates


def _extract_free_text(
    text: str, decision: ModeDecision, patterns: PatternLibrary
) -> list[Candidate]:
    candidates: list[Candidate] = []
    candidates.extend(_scan_skill_headers(text, patterns))
    candidates.extend(_scan_dense_lists(text, patterns))
    candidates.extend(_scan_technical_terms(text, patterns))
    return [c for c in candidates if is_valid_skill_candidate(c[1], patterns)]


_STRATEGIES: dict[SkillExtractionMode, Callable[[str, ModeDecision, PatternLibrary], list[Candidate]]] = {
    SkillExtractionMode.SECTION: _extract_section_mode,
    SkillExtractionMode.FREE_TEXT: _extract_free_text,
}


def extract_skills(text: str, patterns: PatternLibrary = PATTERNS) -> list[str]:
    """Extract skills in source order, unique case-insensitively."""
    decision = detect_mode(text, patterns)
    candidates = _STRATEGIES[decision.mode](text, decision, patterns)
    candidates.sort(key=itemgetter(0))
    skills = dedupe_case_insensitive(skill for _, skill in candidates)
    logger.debug("Extracted %d skills in %s mode", len(skills), decision.mode.value)
    return skills

"""Compiled matching rules shared by every extractor.

A single ``PatternLibrary`` is built at import time (``PATTERNS``) and is
never mutated afterwards, so it can be read from any number of threads.
Extractors take it as a keyword argument defaulting to ``PATTERNS``.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

MONTH_NAMES: tuple[str, ...] = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_MONTHS = "|".join(MONTH_NAMES)

# Resume section tokens (used both as headers and as stop tokens)
PROJECTS_TOKEN = r"PROJECTS?"
EXPERIENCE_TOKEN = r"EXPERIENCE"
EDUCATION_TOKEN = r"EDUCATION"
CERTIFICATIONS_TOKEN = r"CERTIFICATIONS?"
TECHNICAL_SKILLS_TOKEN = r"TECHNICAL[ \t]+SKILLS?"


def _month_table() -> Mapping[str, int]:
    return MappingProxyType(
        {name: number for number, name in enumerate(MONTH_NAMES, start=1)}
    )


def section_header(*tokens: str) -> re.Pattern:
    """Header line for a resume section.

    Matches at the start of a line, allows one qualifier word in front
    ("Work Experience") and requires the token to end the line or be
    followed by a colon. The colon itself is not consumed.
    """
    combined = "|".join(tokens)
    return re.compile(
        rf"^[ \t]*(?:[A-Za-z]+[ \t]+)?(?:{combined})(?=[ \t]*(?::|\r?$))",
        re.IGNORECASE | re.MULTILINE,
    )


@dataclass(frozen=True)
class PatternLibrary:
    """Every regex, lookup table and threshold the extractors rely on."""

    month_numbers: Mapping[str, int] = field(default_factory=_month_table)

    # --- Section location ---
    technical_skills_header: re.Pattern = field(
        default_factory=lambda: section_header(TECHNICAL_SKILLS_TOKEN)
    )
    projects_header: re.Pattern = field(
        default_factory=lambda: section_header(PROJECTS_TOKEN)
    )
    experience_header: re.Pattern = field(
        default_factory=lambda: section_header(EXPERIENCE_TOKEN)
    )
    technical_skills_stops: re.Pattern = field(
        default_factory=lambda: section_header(
            PROJECTS_TOKEN, EXPERIENCE_TOKEN, EDUCATION_TOKEN, CERTIFICATIONS_TOKEN
        )
    )
    projects_stops: re.Pattern = field(
        default_factory=lambda: section_header(
            TECHNICAL_SKILLS_TOKEN, EDUCATION_TOKEN, CERTIFICATIONS_TOKEN, EXPERIENCE_TOKEN
        )
    )
    experience_stops: re.Pattern = field(
        default_factory=lambda: section_header(
            PROJECTS_TOKEN, TECHNICAL_SKILLS_TOKEN, EDUCATION_TOKEN, CERTIFICATIONS_TOKEN
        )
    )
    # "Required Skills:", "Tools:", "Tech Stack:" ... anywhere on a line
    skill_header_line: re.Pattern = re.compile(
        r"^[^\n]*?(?:skills?|tools?|technologies|tech[ \t]+stack|expertise|"
        r"qualifications?|requirements?):",
        re.IGNORECASE | re.MULTILINE,
    )
    # An upper-case heading line such as "RESPONSIBILITIES" or "NICE TO HAVE:"
    generic_header: re.Pattern = re.compile(r"^[ \t]*[A-Z][A-Z \t]{8,}(?::|\r?$)", re.MULTILINE)
    blank_line: re.Pattern = re.compile(r"\n[ \t\r]*\n")
    leading_whitespace: re.Pattern = re.compile(r"\s*")

    # --- Skill candidates ---
    bullet_prefix: re.Pattern = re.compile(r"^\s*[•◦*\d.-]+\s*")
    list_item: re.Pattern = re.compile(r"[^,;|/]+")
    connector_prefix: re.Pattern = re.compile(
        r"^(?:and|or|with|using|via|through|in|on)\s+", re.IGNORECASE
    )
    edge_noise: re.Pattern = re.compile(r"^[\s•◦*-]+|[\s•◦*-]+$")
    trailing_punctuation: re.Pattern = re.compile(r"[.!?]$")
    capitalized_term: re.Pattern = re.compile(
        r"(?<![\w#+])(?P<symbol>C\+\+|C#)(?![\w#+])"
        r"|\b(?P<word>[A-Z][a-z]+\.js|[A-Z][A-Za-z]*)\b"
    )
    joined_symbol_term: re.Pattern = re.compile(r"\b([A-Za-z]+[/#.+][A-Za-z0-9.+#/]+)\b")
    frequency_noise: re.Pattern = re.compile(r"[^A-Za-z0-9#+.]")

    # --- Technical pattern heuristic ---
    all_caps: re.Pattern = re.compile(r"^[A-Z]{2,}$")
    digit: re.Pattern = re.compile(r"\d")
    technical_symbol: re.Pattern = re.compile(r"[.#+/]")
    camel_case: re.Pattern = re.compile(r"^[A-Z][a-z]+[A-Z]")
    technical_suffixes: tuple[str, ...] = (".js", "sql", "script")
    technical_exact: frozenset[str] = frozenset({"c++", "c#"})

    # --- Candidate validation ---
    has_letter: re.Pattern = re.compile(r"[A-Za-z]")
    numeric: re.Pattern = re.compile(r"^[0-9.]+$")
    url: re.Pattern = re.compile(r"^(?:https?://|www\.)", re.IGNORECASE)
    sentence_boundary: re.Pattern = re.compile(r"[.!?]\s+\S")
    bare_lowercase: re.Pattern = re.compile(r"^[a-z]+$")
    whitespace_run: re.Pattern = re.compile(r"\s+")

    # --- Education, projects, experience ---
    degree: re.Pattern = re.compile(
        r"\b(B\.?\s*Tech|BCA|M\.?\s*Tech|MCA|Bachelor(?:'?s)?|Master(?:'?s)?|"
        r"B\.?\s*E\.?|M\.?\s*E\.?|MBA|Ph\.?\s*D\.?)(?!\w)",
        re.IGNORECASE,
    )
    project_line: re.Pattern = re.compile(
        rf"^[ \t]*[•◦-][ \t]+([A-Za-z0-9 \t&-]+?)[ \t]+(?:{_MONTHS})[ \t]+\d{{4}}[ \t]*\r?$",
        re.IGNORECASE | re.MULTILINE,
    )
    date_range: re.Pattern = re.compile(
        rf"({_MONTHS})\s+(\d{{4}})\s*-\s*({_MONTHS})\s+(\d{{4}})",
        re.IGNORECASE,
    )

    # --- Thresholds ---
    min_term_length: int = 2
    max_term_length: int = 30
    min_candidate_length: int = 2
    max_candidate_length: int = 50
    max_candidate_words: int = 5
    short_word_length: int = 4
    max_list_line_length: int = 200
    min_list_commas: int = 2
    min_term_frequency: int = 2


PATTERNS = PatternLibrary()

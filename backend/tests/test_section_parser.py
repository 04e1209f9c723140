from services.patterns import PATTERNS
from services.section_parser import (
    NOT_SPECIFIED,
    extract_education,
    extract_experience,
    extract_projects,
    find_section_end,
    format_duration,
    locate_section,
)


# --- Section location ---

def test_locate_section_missing_header():
    assert locate_section("No headers here", PATTERNS.experience_header, ()) is None


def test_locate_section_stops_at_next_header():
    text = "EXPERIENCE\nAcme Corp\nEDUCATION\nB.Tech"
    section = locate_section(text, PATTERNS.experience_header, (PATTERNS.experience_stops,))
    assert section.body.strip() == "Acme Corp"
    assert text[section.start:section.end] == section.body


def test_locate_section_runs_to_end_of_text():
    text = "EXPERIENCE\nAcme Corp\nInitech"
    section = locate_section(text, PATTERNS.experience_header, (PATTERNS.experience_stops,))
    assert section.end == len(text)
    assert "Initech" in section.body


def test_locate_section_accepts_qualified_header():
    text = "Professional Experience:\nAcme Corp"
    section = locate_section(text, PATTERNS.experience_header, ())
    assert section is not None
    assert "Acme Corp" in section.body


def test_locate_section_ignores_word_in_prose():
    text = "Experience with distributed systems is a plus"
    assert locate_section(text, PATTERNS.experience_header, ()) is None


def test_locate_section_first_occurrence_wins():
    text = "EXPERIENCE\nfirst\nPROJECTS\nx\nEXPERIENCE\nsecond"
    section = locate_section(text, PATTERNS.experience_header, (PATTERNS.experience_stops,))
    assert "first" in section.body
    assert "second" not in section.body


def test_find_section_end_blank_line():
    text = "Skills:\nPython, Java\n\nAbout us"
    start = text.index(":") + 1
    end = find_section_end(text, start, (), stop_at_blank_line=True)
    assert text[start:end].strip() == "Python, Java"


def test_find_section_end_skips_leading_blank_lines():
    text = "TECHNICAL SKILLS\n\nLanguages: Go\n\nOther"
    start = len("TECHNICAL SKILLS")
    end = find_section_end(text, start, (), stop_at_blank_line=True)
    assert text[start:end].strip() == "Languages: Go"


def test_find_section_end_generic_uppercase_header():
    text = "Tools:\nGit, Jira\nRESPONSIBILITIES\nShip code"
    start = text.index(":") + 1
    end = find_section_end(text, start, (PATTERNS.generic_header,))
    assert text[start:end].strip() == "Git, Jira"


# --- Education ---

def test_extract_education_degrees_in_order():
    text = "B.Tech from ABC, then M.Tech and an MBA. Also b.tech again."
    assert extract_education(text) == ["B.Tech", "M.Tech", "MBA"]


def test_extract_education_variants():
    assert extract_education("Bachelor's in Engineering") == ["Bachelor's"]
    assert extract_education("PhD in Physics") == ["PhD"]
    assert extract_education("B.E. in Mechanical Engineering") == ["B.E."]
    assert extract_education("BCA and MCA graduate") == ["BCA", "MCA"]
    assert extract_education("B Tech in IT") == ["B Tech"]


def test_extract_education_undotted_degrees_any_case():
    assert extract_education("I would be glad to join") == ["be"]
    assert extract_education("BE in Civil, ME in Structures") == ["BE", "ME"]
    assert extract_education("M. E. in Thermal Engineering") == ["M. E."]


def test_extract_education_none():
    assert extract_education("Some random text") == []


# --- Projects ---

def test_extract_projects(sample_resume):
    assert extract_projects(sample_resume) == ["Inventory Tracker App", "Chat Server"]


def test_extract_projects_no_section():
    assert extract_projects("• Chat Server December 2021") == []


def test_extract_projects_collapses_whitespace():
    text = "PROJECTS\n•  Weather   Dashboard  July 2023\n"
    assert extract_projects(text) == ["Weather Dashboard"]


def test_extract_projects_strict_line_shape():
    text = (
        "PROJECTS\n"
        "• Chat Server December 2021 (team of 3)\n"
        "Chat Server December 2021\n"
        "◦ Budget Planner May 2020\n"
    )
    assert extract_projects(text) == ["Budget Planner"]


def test_extract_projects_stops_at_next_section():
    text = "PROJECTS\n- Chat Server December 2021\nEDUCATION\n- Thesis Work May 2019\n"
    assert extract_projects(text) == ["Chat Server"]


def test_extract_projects_dedupes():
    text = "PROJECTS\n- Chat Server December 2021\n- chat server January 2022\n"
    assert extract_projects(text) == ["Chat Server"]


# --- Experience ---

def test_extract_experience_single_range():
    text = "EXPERIENCE\nDeveloper at Acme\nJanuary 2020 - March 2021\n"
    assert extract_experience(text) == "1 year 3 months"


def test_extract_experience_sums_ranges(sample_resume):
    # 15 months + 3 months
    assert extract_experience(sample_resume) == "1 year 6 months"


def test_extract_experience_double_counts_overlap():
    text = (
        "EXPERIENCE\n"
        "Job A January 2020 - December 2020\n"
        "Job B January 2020 - December 2020\n"
    )
    assert extract_experience(text) == "2 years"


def test_extract_experience_case_insensitive_months():
    text = "EXPERIENCE\nintern, june 2021 - august 2021"
    assert extract_experience(text) == "3 months"


def test_extract_experience_single_month():
    assert extract_experience("EXPERIENCE\nMay 2021 - May 2021") == "1 month"


def test_extract_experience_no_section():
    assert extract_experience("January 2020 - March 2021") == NOT_SPECIFIED


def test_extract_experience_no_dates():
    assert extract_experience("EXPERIENCE\nWorked at Acme for a while\n") == NOT_SPECIFIED


def test_extract_experience_ignores_ranges_after_section():
    text = "EXPERIENCE\nMay 2021 - May 2021\nPROJECTS\nJanuary 2019 - December 2019\n"
    assert extract_experience(text) == "1 month"


def test_extract_experience_reversed_range_renders_empty():
    # (2021 - 2021) * 12 + (1 - 3) + 1 = -1 months
    assert extract_experience("EXPERIENCE\nMarch 2021 - January 2021") == ""
    # start month one past the end month sums to exactly zero
    assert extract_experience("EXPERIENCE\nMarch 2021 - February 2021") == NOT_SPECIFIED


def test_format_duration():
    assert format_duration(0) == NOT_SPECIFIED
    assert format_duration(-4) == ""
    assert format_duration(1) == "1 month"
    assert format_duration(12) == "1 year"
    assert format_duration(14) == "1 year 2 months"
    assert format_duration(25) == "2 years 1 month"

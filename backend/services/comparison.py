"""Resume-vs-job skill diff: matched/missing skills, match %, suggestions."""

import math

from models.results import ComparisonResult
from services.dedupe import dedupe_case_insensitive

MAX_LISTED_MISSING = 5
LOW_MATCH_THRESHOLD = 50.0
GOOD_MATCH_THRESHOLD = 75.0

LOW_MATCH_MESSAGE = (
    "Your resume matches less than 50% of job requirements. "
    "Consider gaining experience in missing skills."
)
GOOD_MATCH_MESSAGE = "Good match! Adding the missing skills would make your profile stronger."
EXCELLENT_MATCH_MESSAGE = "Excellent match! You have most of the required skills."


def compute_match_percentage(matched_count: int, job_skill_count: int) -> float:
    """Share of job skills matched, 0-100, rounded half-up to 2 decimals."""
    if job_skill_count == 0:
        return 0.0
    return math.floor(matched_count / job_skill_count * 100 * 100 + 0.5) / 100


def generate_job_suggestions(missing_skills: list[str], match_percentage: float) -> list[str]:
    suggestions = []

    if missing_skills:
        if len(missing_skills) <= MAX_LISTED_MISSING:
            suggestions.append("Add these missing skills: " + ", ".join(missing_skills))
        else:
            listed = ", ".join(missing_skills[:MAX_LISTED_MISSING])
            remaining = len(missing_skills) - MAX_LISTED_MISSING
            suggestions.append(f"Add these key missing skills: {listed} and {remaining} more")

    if match_percentage < LOW_MATCH_THRESHOLD:
        suggestions.append(LOW_MATCH_MESSAGE)
    elif match_percentage < GOOD_MATCH_THRESHOLD:
        suggestions.append(GOOD_MATCH_MESSAGE)
    else:
        suggestions.append(EXCELLENT_MATCH_MESSAGE)

    return dedupe_case_insensitive(suggestions)


def compare_skills(resume_skills: list[str], job_skills: list[str]) -> ComparisonResult:
    """Split job skills into matched/missing against the resume, case-insensitively.

    Both lists keep the job posting's order and casing.
    """
    resume_lower = {skill.lower() for skill in resume_skills}

    matched: list[str] = []
    missing: list[str] = []
    for skill in job_skills:
        if skill.lower() in resume_lower:
            matched.append(skill)
        else:
            missing.append(skill)

    matched = dedupe_case_insensitive(matched)
    missing = dedupe_case_insensitive(missing)
    match_percentage = compute_match_percentage(len(matched), len(job_skills))

    return ComparisonResult(
        matched_skills=matched,
        missing_skills=missing,
        match_percentage=match_percentage,
        suggestions=generate_job_suggestions(missing, match_percentage),
    )

"""ATS completeness score and improvement suggestions for a resume."""

from services.dedupe import dedupe_case_insensitive
from services.section_parser import NOT_SPECIFIED

# Category weights, summing to MAX_SCORE
W_SKILLS = 30
W_EXPERIENCE = 30
W_EDUCATION = 20
W_PROJECTS = 20
MAX_SCORE = 100

SKILLS_SUGGESTION = "Add your technical skills to improve visibility."
EXPERIENCE_SUGGESTION = "Mention your work experience with dates."
EDUCATION_SUGGESTION = "Add your education details."
PROJECTS_SUGGESTION = "Add projects to showcase your practical experience."


def _has_experience(experience: str) -> bool:
    return experience != NOT_SPECIFIED


def compute_ats_score(
    skills: list[str], experience: str, education: list[str], projects: list[str]
) -> int:
    """Score 0-100: one fixed weight per category that is present."""
    score = 0
    if skills:
        score += W_SKILLS
    if _has_experience(experience):
        score += W_EXPERIENCE
    if education:
        score += W_EDUCATION
    if projects:
        score += W_PROJECTS
    return min(score, MAX_SCORE)


def generate_suggestions(
    skills: list[str], experience: str, education: list[str], projects: list[str]
) -> list[str]:
    """One message per missing category, in skills/experience/education/projects order."""
    suggestions = []
    if not skills:
        suggestions.append(SKILLS_SUGGESTION)
    if not _has_experience(experience):
        suggestions.append(EXPERIENCE_SUGGESTION)
    if not education:
        suggestions.append(EDUCATION_SUGGESTION)
    if not projects:
        suggestions.append(PROJECTS_SUGGESTION)
    return dedupe_case_insensitive(suggestions)

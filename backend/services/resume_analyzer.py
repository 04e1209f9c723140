"""Public engine operations: analyze a resume, compare it with a job posting.

Pipeline:
1. Validation (ValidationError on empty or too-short input)
2. Skill extraction (section mode or free-text mode)
3. Experience / education / project extraction (resume only)
4. ATS scoring and suggestions, or skill comparison against the job
5. Final case-insensitive dedupe of every list

Both operations are pure: same text in, same result out.
"""

import logging
from typing import Optional

from models.results import AnalysisResult, ComparisonResult, ResumeFacts
from services.comparison import compare_skills
from services.dedupe import dedupe_case_insensitive
from services.exceptions import AnalysisError, ComparisonError, ValidationError
from services.patterns import PATTERNS, PatternLibrary
from services.scoring import compute_ats_score, generate_suggestions
from services.section_parser import extract_education, extract_experience, extract_projects
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

MIN_RESUME_LENGTH = 50


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def extract_resume_facts(resume_text: str, patterns: PatternLibrary = PATTERNS) -> ResumeFacts:
    """Run the four extractors over one resume."""
    return ResumeFacts(
        skills=dedupe_case_insensitive(extract_skills(resume_text, patterns)),
        experience=extract_experience(resume_text, patterns),
        education=dedupe_case_insensitive(extract_education(resume_text, patterns)),
        projects=dedupe_case_insensitive(extract_projects(resume_text, patterns)),
    )


def analyze(resume_text: Optional[str]) -> AnalysisResult:
    """Extract facts from a resume and score it."""
    if _is_blank(resume_text):
        raise ValidationError("Resume text must not be empty")
    if len(resume_text) < MIN_RESUME_LENGTH:
        raise ValidationError(
            f"Resume text is too short to analyze (minimum {MIN_RESUME_LENGTH} characters)"
        )

    try:
        facts = extract_resume_facts(resume_text)
        ats_score = compute_ats_score(
            facts.skills, facts.experience, facts.education, facts.projects
        )
        suggestions = generate_suggestions(
            facts.skills, facts.experience, facts.education, facts.projects
        )
        result = AnalysisResult(
            skills=facts.skills,
            experience=facts.experience,
            education=facts.education,
            projects=facts.projects,
            ats_score=ats_score,
            suggestions=dedupe_case_insensitive(suggestions),
        )
    except Exception as e:
        logger.exception("Resume analysis failed")
        raise AnalysisError(f"Failed to analyze resume: {e}") from e

    logger.info(
        "Analyzed resume: %d skills, experience=%r, %d degrees, %d projects, ats=%d",
        len(result.skills), result.experience, len(result.education),
        len(result.projects), result.ats_score,
    )
    return result


def compare(resume_text: Optional[str], job_text: Optional[str]) -> ComparisonResult:
    """Diff resume skills against the skills a job posting asks for."""
    if _is_blank(resume_text):
        raise ValidationError("Resume text must not be empty")
    if _is_blank(job_text):
        raise ValidationError("Job description text must not be empty")
    if len(resume_text) < MIN_RESUME_LENGTH:
        raise ValidationError(
            f"Resume text is too short (minimum {MIN_RESUME_LENGTH} characters)"
        )

    try:
        resume_skills = dedupe_case_insensitive(extract_skills(resume_text))
        job_skills = dedupe_case_insensitive(extract_skills(job_text))
        result = compare_skills(resume_skills, job_skills)
    except Exception as e:
        logger.exception("Job comparison failed")
        raise ComparisonError(f"Failed to compare job description: {e}") from e

    logger.info(
        "Compared resume with job: %d/%d skills matched (%.2f%%)",
        len(result.matched_skills), len(job_skills), result.match_percentage,
    )
    return result

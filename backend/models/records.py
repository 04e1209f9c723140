"""Stored records handed to the repository."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoredRecord(BaseModel):
    """Base for repository records; ``id`` is assigned on save."""
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    created_at: datetime = Field(default_factory=_utcnow)


class ResumeAnalysisRecord(StoredRecord):
    resume_text: str
    skills: list[str] = []
    experience: str = "Not specified"
    education: list[str] = []
    projects: list[str] = []
    ats_score: int = 0
    suggestions: list[str] = []


class JobMatchRecord(StoredRecord):
    resume_analysis_id: Optional[int] = None
    job_description: str
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    match_percentage: float = 0.0
    suggestions: list[str] = []

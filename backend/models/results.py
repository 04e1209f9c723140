"""Engine outputs: values computed from input text, never mutated."""

from pydantic import BaseModel, ConfigDict, Field


class ResumeFacts(BaseModel):
    """The four facts extracted from one resume."""
    model_config = ConfigDict(frozen=True)

    skills: list[str] = []
    experience: str = "Not specified"
    education: list[str] = []
    projects: list[str] = []


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: list[str] = []
    experience: str = "Not specified"
    education: list[str] = []
    projects: list[str] = []
    ats_score: int = Field(default=0, ge=0, le=100)
    suggestions: list[str] = []


class ComparisonResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched_skills: list[str] = []
    missing_skills: list[str] = []
    match_percentage: float = Field(default=0.0, ge=0.0, le=100.0)  # rounded to 2 decimals
    suggestions: list[str] = []

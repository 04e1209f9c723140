from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorResponse(BaseModel):
    message: str


class ApiResponse(BaseModel, Generic[T]):
    """Envelope for every route: exactly one of ``data`` / ``error`` is set."""
    data: Optional[T] = None
    error: Optional[ErrorResponse] = None


class Page(BaseModel, Generic[T]):
    items: list[T] = []
    page: int = 0
    size: int = 10
    total_elements: int = 0
    total_pages: int = 0


class ResumeAnalysisResponse(BaseModel):
    id: int
    skills: list[str] = []
    experience: str = "Not specified"
    education: list[str] = []
    projects: list[str] = []
    ats_score: int = 0
    suggestions: list[str] = []
    created_at: datetime


class JobComparisonResponse(BaseModel):
    id: int
    resume_analysis_id: Optional[int] = None
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    match_percentage: float = 0.0
    suggestions: list[str] = []
    created_at: datetime

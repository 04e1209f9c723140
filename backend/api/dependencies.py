"""Shared dependencies for API routes."""

from models.records import JobMatchRecord, ResumeAnalysisRecord
from services.storage import Repository

_resume_store: Repository[ResumeAnalysisRecord] = Repository("Resume")
_job_match_store: Repository[JobMatchRecord] = Repository("Job match")


def get_resume_store() -> Repository[ResumeAnalysisRecord]:
    return _resume_store


def get_job_match_store() -> Repository[JobMatchRecord]:
    return _job_match_store

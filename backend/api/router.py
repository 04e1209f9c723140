import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_job_match_store, get_resume_store
from config import settings
from models.records import JobMatchRecord, ResumeAnalysisRecord
from models.requests import JobCompareRequest, ResumeAnalyzeRequest
from models.responses import ApiResponse, JobComparisonResponse, Page, ResumeAnalysisResponse
from models.results import AnalysisResult
from services import pdf_parser, resume_analyzer
from services.exceptions import ComparisonError, ValidationError
from services.storage import Repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

ResumeStore = Repository[ResumeAnalysisRecord]
JobMatchStore = Repository[JobMatchRecord]


def _check_length(text: Optional[str], limit: int, label: str) -> None:
    if text is not None and len(text) > limit:
        raise ValidationError(f"{label} too long (max {limit} chars)")


def _to_resume_response(record: ResumeAnalysisRecord) -> ResumeAnalysisResponse:
    return ResumeAnalysisResponse.model_validate(record.model_dump())


def _to_job_response(record: JobMatchRecord) -> JobComparisonResponse:
    return JobComparisonResponse.model_validate(record.model_dump())


def _map_page(records: Page, mapper: Callable[[BaseModel], BaseModel]) -> dict:
    return {
        **records.model_dump(exclude={"items"}),
        "items": [mapper(r) for r in records.items],
    }


def _store_analysis(
    resume_text: str, result: AnalysisResult, store: ResumeStore
) -> ResumeAnalysisResponse:
    record_id = store.save(ResumeAnalysisRecord(resume_text=resume_text, **result.model_dump()))
    return _to_resume_response(store.find_by_id(record_id))


def _store_linked_resume(resume_text: str, store: ResumeStore) -> int:
    """Save the compared resume's facts (unscored) so the job match can point at it."""
    try:
        facts = resume_analyzer.extract_resume_facts(resume_text)
    except Exception as e:
        logger.exception("Resume extraction for job comparison failed")
        raise ComparisonError(f"Failed to compare job description: {e}") from e
    return store.save(ResumeAnalysisRecord(resume_text=resume_text, **facts.model_dump()))


@router.get("/health", response_model=ApiResponse[str])
def health():
    return ApiResponse[str](data="Resume Analyzer API is running!")


# ---------------------------------------------------------------------------
# Resume analyses
# ---------------------------------------------------------------------------


@router.post("/analyze-resume", response_model=ApiResponse[ResumeAnalysisResponse])
@limiter.limit(settings.rate_limit)
def analyze_resume(
    request: Request,
    body: ResumeAnalyzeRequest,
    store: ResumeStore = Depends(get_resume_store),
):
    _check_length(body.resume_text, settings.max_resume_chars, "Resume text")
    result = resume_analyzer.analyze(body.resume_text)
    return ApiResponse[ResumeAnalysisResponse](
        data=_store_analysis(body.resume_text, result, store)
    )


@router.post("/analyze-resume/upload", response_model=ApiResponse[ResumeAnalysisResponse])
@limiter.limit(settings.rate_limit)
async def analyze_resume_upload(
    request: Request,
    resume_file: UploadFile = File(...),
    store: ResumeStore = Depends(get_resume_store),
):
    filename = resume_file.filename or ""
    if not filename.lower().endswith(pdf_parser.SUPPORTED_EXTENSIONS):
        raise ValidationError("Only PDF and DOCX files are accepted")

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise ValidationError(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    try:
        resume_text = pdf_parser.extract_document_text(filename, content)
    except Exception as e:
        logger.info("Could not parse uploaded document %s: %s", filename, e)
        raise ValidationError("Could not parse uploaded document") from e

    if not resume_text.strip():
        raise ValidationError("No text could be extracted from document")
    _check_length(resume_text, settings.max_resume_chars, "Resume text")

    result = resume_analyzer.analyze(resume_text)
    return ApiResponse[ResumeAnalysisResponse](data=_store_analysis(resume_text, result, store))


@router.get("/analyze-resume", response_model=ApiResponse[Page[ResumeAnalysisResponse]])
def list_resume_analyses(
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    store: ResumeStore = Depends(get_resume_store),
):
    records = store.find_all(page, size)
    return ApiResponse[Page[ResumeAnalysisResponse]](
        data=Page[ResumeAnalysisResponse](**_map_page(records, _to_resume_response))
    )


@router.get("/analyze-resume/{record_id}", response_model=ApiResponse[ResumeAnalysisResponse])
def get_resume_analysis(record_id: int, store: ResumeStore = Depends(get_resume_store)):
    return ApiResponse[ResumeAnalysisResponse](
        data=_to_resume_response(store.find_by_id(record_id))
    )


@router.delete("/analyze-resume/{record_id}", response_model=ApiResponse[str])
def delete_resume_analysis(record_id: int, store: ResumeStore = Depends(get_resume_store)):
    store.delete(record_id)
    return ApiResponse[str](data="Resume deleted successfully")


# ---------------------------------------------------------------------------
# Job description comparisons
# ---------------------------------------------------------------------------


@router.post(
    "/compare-job-description",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[JobComparisonResponse],
)
@limiter.limit(settings.rate_limit)
def compare_job_description(
    request: Request,
    body: JobCompareRequest,
    resume_store: ResumeStore = Depends(get_resume_store),
    job_store: JobMatchStore = Depends(get_job_match_store),
):
    _check_length(body.resume_text, settings.max_resume_chars, "Resume text")
    _check_length(
        body.job_description_text, settings.max_job_description_chars, "Job description"
    )
    result = resume_analyzer.compare(body.resume_text, body.job_description_text)

    resume_id = _store_linked_resume(body.resume_text, resume_store)
    record_id = job_store.save(
        JobMatchRecord(
            resume_analysis_id=resume_id,
            job_description=body.job_description_text,
            **result.model_dump(),
        )
    )
    return ApiResponse[JobComparisonResponse](
        data=_to_job_response(job_store.find_by_id(record_id))
    )


@router.get("/compare-job-description", response_model=ApiResponse[Page[JobComparisonResponse]])
def list_job_comparisons(
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    store: JobMatchStore = Depends(get_job_match_store),
):
    records = store.find_all(page, size)
    return ApiResponse[Page[JobComparisonResponse]](
        data=Page[JobComparisonResponse](**_map_page(records, _to_job_response))
    )


@router.get("/compare-job-description/{record_id}", response_model=ApiResponse[JobComparisonResponse])
def get_job_comparison(record_id: int, store: JobMatchStore = Depends(get_job_match_store)):
    return ApiResponse[JobComparisonResponse](data=_to_job_response(store.find_by_id(record_id)))


@router.delete("/compare-job-description/{record_id}", response_model=ApiResponse[str])
def delete_job_comparison(record_id: int, store: JobMatchStore = Depends(get_job_match_store)):
    store.delete(record_id)
    return ApiResponse[str](data="Job match deleted successfully")

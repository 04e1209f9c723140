from typing import Optional

from pydantic import BaseModel, Field


class ResumeAnalyzeRequest(BaseModel):
    # Optional so that missing text is reported by the engine as a 400
    resume_text: Optional[str] = Field(None, description="Plain text resume content")


class JobCompareRequest(BaseModel):
    resume_text: Optional[str] = Field(None, description="Plain text resume content")
    job_description_text: Optional[str] = Field(None, description="Job description text")

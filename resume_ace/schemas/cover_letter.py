"""
Pydantic schemas for cover letter endpoints.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class CoverLetterResponse(BaseModel):
    """Generated cover letter. Fallback results also carry highlights and improvements."""
    cover_letter: str = Field(..., alias="coverLetter")
    highlights: Optional[List[str]] = None
    suggested_improvements: Optional[List[str]] = Field(None, alias="suggestedImprovements")

    class Config:
        populate_by_name = True


class CoverLetterTextRequest(BaseModel):
    """Request body for cover letters built from free text instead of a PDF."""
    job_description: Optional[str] = Field(None, alias="jobDescription")
    skills_experience: Optional[str] = Field(None, alias="skillsExperience")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "jobDescription": "Backend engineer, Python and FastAPI...",
                "skillsExperience": "5 years building APIs in Python...",
            }
        }


class CoverLetterTextResponse(BaseModel):
    """Envelope used by the text cover letter endpoint."""
    success: bool = True
    data: CoverLetterResponse

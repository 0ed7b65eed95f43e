"""
Pydantic schemas for the ATS check endpoint.
"""
from typing import List, Union
from pydantic import BaseModel, Field


class AtsCheckResponse(BaseModel):
    """ATS compatibility result."""
    score: Union[int, float] = Field(..., description="ATS compatibility score, nominally 0-100")
    findings: List[str] = Field(default_factory=list, description="Observations about ATS-friendliness")
    suggestions: List[str] = Field(default_factory=list, description="Suggested improvements")

    class Config:
        json_schema_extra = {
            "example": {
                "score": 82,
                "findings": ["Good keyword density"],
                "suggestions": ["Add metrics"],
            }
        }

"""
Pydantic schemas for job listing endpoints.
"""
from pydantic import BaseModel, Field


class JobListing(BaseModel):
    """A job posting shown on the board."""
    id: int = Field(..., description="Job ID")
    title: str = Field(..., description="Job title")
    location: str = Field(..., description="Prefecture or city")
    salary: str = Field(..., description="Monthly salary, display string")
    type: str = Field(..., description="Visa program the job is eligible for")
    
    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "title": "Construction Worker",
                "location": "Tokyo",
                "salary": "250,000 JPY",
                "type": "Ikusei Shūurō"
            }
        }

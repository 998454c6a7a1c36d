"""
Job board endpoints.

Listings are a fixed in-memory set; nothing is persisted.
"""
from typing import List
from fastapi import APIRouter, HTTPException, status

from app.schemas.job import JobListing

router = APIRouter(prefix="/api/jobs", tags=["Jobs"])

JOB_LISTINGS = [
    {"id": 1, "title": "Construction Worker", "location": "Tokyo", "salary": "250,000 JPY", "type": "Ikusei Shūurō"},
    {"id": 2, "title": "Food Processing", "location": "Osaka", "salary": "220,000 JPY", "type": "Tokutei Ginou"},
    {"id": 3, "title": "Care Worker", "location": "Nagoya", "salary": "235,000 JPY", "type": "Ikusei Shūurō"},
    {"id": 4, "title": "Agricultural Labor", "location": "Hokkaido", "salary": "210,000 JPY", "type": "Tokutei Ginou"},
]


@router.get("", response_model=List[JobListing])
def list_jobs():
    """Return every job listing. Query parameters are ignored."""
    return JOB_LISTINGS


@router.get("/{job_id}", response_model=JobListing)
def get_job(job_id: int):
    """Return a single job listing for the detail page."""
    for job in JOB_LISTINGS:
        if job["id"] == job_id:
            return job
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Job not found"
    )

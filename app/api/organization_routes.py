from fastapi import APIRouter, HTTPException, Query
from fastapi import status
from typing import Optional, Dict, Any
import logging

from app.schemas.organization_schema import (
    OrganizationSubmissionRequest,
    OrganizationReviewRequest,
    OrganizationStats,
    SubmissionStatusEnum,
)
from app.services.organization_service import (
    organization_service,
    serialize_submission,
    SubmissionNotFoundError,
    SubmissionAlreadyReviewedError,
)

router = APIRouter(prefix="/organizations", tags=["Organizations"])

logger = logging.getLogger(__name__)


@router.post("/submit", status_code=status.HTTP_201_CREATED)
async def submit_organization(payload: OrganizationSubmissionRequest) -> Dict[str, Any]:
    """Lender intake form. New submissions start as pending."""
    try:
        submission = await organization_service.submit(payload)
        return {
            "success": True,
            "id": str(submission.id),
            "status": submission.status.value,
            "message": "Organization submitted for review",
        }
    except Exception as e:
        logger.error(f"Error submitting organization: {e}")
        raise HTTPException(status_code=500, detail="Failed to submit organization")


@router.get("/submissions")
async def list_submissions(
    status_filter: Optional[SubmissionStatusEnum] = Query(default=None, alias="status"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=1000),
) -> Dict[str, Any]:
    try:
        return await organization_service.list_submissions(status=status_filter, skip=skip, limit=limit)
    except Exception as e:
        logger.error(f"Error listing organization submissions: {e}")
        raise HTTPException(status_code=500, detail="Failed to list organization submissions")


@router.get("/submissions/{submission_id}")
async def get_submission(submission_id: str) -> Dict[str, Any]:
    try:
        submission = await organization_service.get_submission(submission_id)
        return serialize_submission(submission)
    except SubmissionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(f"Error retrieving organization submission {submission_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve organization submission")


@router.put("/submissions/{submission_id}/review")
async def review_submission(submission_id: str, payload: OrganizationReviewRequest) -> Dict[str, Any]:
    try:
        submission = await organization_service.review(submission_id, payload)
        return {
            "success": True,
            "message": f"Organization {submission.status.value}",
            "submission": serialize_submission(submission),
        }
    except SubmissionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SubmissionAlreadyReviewedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Error reviewing organization submission {submission_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to review organization submission")


@router.get("/stats", response_model=OrganizationStats)
async def submission_stats():
    try:
        return await organization_service.get_stats()
    except Exception as e:
        logger.error(f"Error computing organization stats: {e}")
        raise HTTPException(status_code=500, detail="Failed to compute organization stats")

import logging
from typing import Optional, Dict, Any, List
from datetime import datetime

from bson import ObjectId
from beanie import PydanticObjectId

from app.database.models.organization_model import OrganizationSubmission
from app.schemas.organization_schema import (
    OrganizationSubmissionRequest,
    OrganizationReviewRequest,
    OrganizationStats,
    SubmissionStatusEnum,
)

logger = logging.getLogger(__name__)


class SubmissionNotFoundError(ValueError):
    def __init__(self, submission_id: str):
        self.submission_id = submission_id
        super().__init__(f"Organization submission not found: {submission_id}")

class SubmissionAlreadyReviewedError(ValueError):
    def __init__(self, submission_id: str, status: SubmissionStatusEnum):
        self.submission_id = submission_id
        self.status = status
        super().__init__(f"Submission {submission_id} was already reviewed ({status.value})")


def serialize_submission(submission: OrganizationSubmission) -> Dict[str, Any]:
    data = submission.model_dump(mode="json", exclude={"id", "revision_id"})
    data["id"] = str(submission.id)
    return data


class OrganizationService:
    """Intake workflow for lenders asking to be listed: submit, then one review."""

    async def submit(self, request: OrganizationSubmissionRequest) -> OrganizationSubmission:
        try:
            submission = OrganizationSubmission(**request.model_dump(), status=SubmissionStatusEnum.pending)
            await submission.insert()
            logger.info(f"Organization submission received: {request.organization_name} (ID: {submission.id})")
            return submission
        except Exception as e:
            logger.error(f"Failed to store organization submission: {e}")
            raise

    async def get_submission(self, submission_id: str) -> OrganizationSubmission:
        if not ObjectId.is_valid(submission_id):
            raise SubmissionNotFoundError(submission_id)

        submission = await OrganizationSubmission.get(PydanticObjectId(submission_id))
        if not submission:
            raise SubmissionNotFoundError(submission_id)
        return submission

    async def list_submissions(
        self,
        status: Optional[SubmissionStatusEnum] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> Dict[str, Any]:
        try:
            query: Dict[str, Any] = {}
            if status:
                query["status"] = status.value

            total = await OrganizationSubmission.find(query).count()
            docs = await OrganizationSubmission.find(query).sort("-submitted_at").skip(skip).limit(limit).to_list()

            results: List[Dict[str, Any]] = [serialize_submission(d) for d in docs]
            return {"data": results, "total": total, "skip": skip, "limit": limit}
        except Exception as e:
            logger.error(f"Failed to query organization submissions: {e}")
            raise

    async def review(self, submission_id: str, decision: OrganizationReviewRequest) -> OrganizationSubmission:
        submission = await self.get_submission(submission_id)

        current = SubmissionStatusEnum(submission.status)
        if current != SubmissionStatusEnum.pending:
            raise SubmissionAlreadyReviewedError(submission_id, current)

        submission.status = SubmissionStatusEnum(decision.status.value)
        submission.review_notes = decision.notes
        submission.reviewer_name = decision.reviewer_name
        submission.reviewed_at = datetime.utcnow()
        await submission.save()

        logger.info(f"Organization submission {submission_id} {decision.status.value} by {decision.reviewer_name}")
        return submission

    async def get_stats(self) -> OrganizationStats:
        pipeline = [{"$group": {"_id": "$status", "count": {"$sum": 1}}}]
        rows = await OrganizationSubmission.aggregate(pipeline).to_list()

        counts = {status.value: 0 for status in SubmissionStatusEnum}
        for row in rows:
            key = row.get("_id") or SubmissionStatusEnum.pending.value
            counts[key] = counts.get(key, 0) + row.get("count", 0)

        return OrganizationStats(total=sum(counts.values()), **counts)


organization_service = OrganizationService()

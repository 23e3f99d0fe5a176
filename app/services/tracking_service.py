import logging
from typing import Optional, Dict, FrozenSet
from datetime import datetime

from bson import ObjectId
from beanie import PydanticObjectId

from app.database.models.loan_application_model import LoanApplication, LoanAmountSnapshot
from app.schemas.loan_schema import Loan, ApplicationStatus
from app.schemas.tracking_schema import TrackApplicationRequest, LoanAmountInfo

logger = logging.getLogger(__name__)


# clicked -> redirected -> completed, with abandoned reachable from either open state
ALLOWED_TRANSITIONS: Dict[ApplicationStatus, FrozenSet[ApplicationStatus]] = {
    ApplicationStatus.clicked: frozenset({ApplicationStatus.redirected, ApplicationStatus.abandoned}),
    ApplicationStatus.redirected: frozenset({ApplicationStatus.completed, ApplicationStatus.abandoned}),
    ApplicationStatus.completed: frozenset(),
    ApplicationStatus.abandoned: frozenset(),
}

_STATUS_TIMESTAMP_FIELDS = {
    ApplicationStatus.redirected: "redirected_at",
    ApplicationStatus.completed: "completed_at",
    ApplicationStatus.abandoned: "abandoned_at",
}


class ApplicationNotFoundError(ValueError):
    def __init__(self, application_id: str):
        self.application_id = application_id
        super().__init__(f"Application not found: {application_id}")

class InvalidStatusTransitionError(ValueError):
    def __init__(self, current: ApplicationStatus, requested: ApplicationStatus):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move application from '{current.value}' to '{requested.value}'")


def can_transition(current: ApplicationStatus, requested: ApplicationStatus) -> bool:
    return requested in ALLOWED_TRANSITIONS[current]


def is_terminal(status: ApplicationStatus) -> bool:
    return not ALLOWED_TRANSITIONS[status]


class TrackingService:
    """Records apply click-throughs and their status changes in MongoDB."""

    # Builds the click event for a catalog loan; no I/O
    @staticmethod
    def build_click_event(
        loan: Loan,
        session_id: Optional[str] = None,
        referrer: Optional[str] = None,
        requested_amount: Optional[float] = None,
    ) -> TrackApplicationRequest:
        return TrackApplicationRequest(
            loan_id=loan.id,
            loan_name=loan.name,
            lender=loan.lender,
            country=loan.country,
            category=loan.category,
            lender_type=loan.lender_type,
            application_url=loan.application_url,
            session_id=session_id,
            referrer=referrer,
            loan_amount=LoanAmountInfo(
                requested=requested_amount,
                min=loan.loan_amount.min,
                max=loan.loan_amount.max,
            ),
            interest_rate=loan.interest_rate,
        )

    async def track_application(
        self,
        event: TrackApplicationRequest,
        user_ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> LoanApplication:
        try:
            application = LoanApplication(
                loan_id=event.loan_id,
                loan_name=event.loan_name,
                lender=event.lender,
                country=event.country,
                category=event.category,
                lender_type=event.lender_type,
                application_url=event.application_url,
                session_id=event.session_id,
                referrer=event.referrer,
                user_ip=user_ip,
                user_agent=user_agent,
                loan_amount=LoanAmountSnapshot(**event.loan_amount.model_dump()) if event.loan_amount else None,
                interest_rate=event.interest_rate,
                status=ApplicationStatus.clicked,
            )
            await application.insert()
            logger.info(f"Tracked application for loan: {event.loan_name} (ID: {application.id})")
            return application
        except Exception as e:
            logger.error(f"Failed to track application for loan {event.loan_id}: {e}")
            raise

    async def get_application(self, application_id: str) -> LoanApplication:
        if not ObjectId.is_valid(application_id):
            raise ApplicationNotFoundError(application_id)

        application = await LoanApplication.get(PydanticObjectId(application_id))
        if not application:
            raise ApplicationNotFoundError(application_id)
        return application

    async def update_status(self, application_id: str, new_status: ApplicationStatus) -> LoanApplication:
        application = await self.get_application(application_id)
        current = ApplicationStatus(application.status)

        if not can_transition(current, new_status):
            logger.warning(f"Rejected status change for application {application_id}: "
                           f"{current.value} -> {new_status.value}")
            raise InvalidStatusTransitionError(current, new_status)

        now = datetime.utcnow()
        application.status = new_status
        setattr(application, _STATUS_TIMESTAMP_FIELDS[new_status], now)
        application.updated_at = now
        await application.save()

        logger.info(f"Application {application_id} status updated to {new_status.value}")
        return application


tracking_service = TrackingService()


async def record_click(
    event: TrackApplicationRequest,
    user_ip: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> None:
    """Background-task entry point: the caller has already responded, so failures are only logged."""
    try:
        await tracking_service.track_application(event, user_ip=user_ip, user_agent=user_agent)
    except Exception as e:
        logger.error(f"Background click tracking failed for loan {event.loan_id}: {e}")

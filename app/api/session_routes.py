from fastapi import APIRouter, HTTPException, Depends
from fastapi import status
import logging

from app.core.config import settings
from app.schemas.loan_schema import UserProfile
from app.schemas.session_schema import SessionState, SessionActionRequest, ListActionEnum
from app.services import session_service
from app.services.comparison_service import ComparisonLimitError
from app.services.loan_catalog_service import LoanCatalogService, LoanNotFoundError
from app.api.loan_routes import get_loan_catalog_service

router = APIRouter(prefix="/session", tags=["Session State"])

logger = logging.getLogger(__name__)


def _require_loan_id(payload: SessionActionRequest, catalog: LoanCatalogService) -> str:
    if not payload.loan_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="'loanId' is required for this action")
    # Removal works for ids that have since left the catalog
    if payload.action == ListActionEnum.remove:
        return payload.loan_id
    try:
        return catalog.get_loan(payload.loan_id).id
    except LoanNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/comparison", response_model=SessionState)
async def update_comparison(
    payload: SessionActionRequest,
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    """Apply an add/remove/clear action to the caller's comparison list."""
    if payload.action == ListActionEnum.clear:
        return session_service.clear_comparison(payload.state)

    loan_id = _require_loan_id(payload, catalog)
    if payload.action == ListActionEnum.remove:
        return session_service.remove_from_comparison(payload.state, loan_id)

    try:
        return session_service.add_to_comparison(payload.state, loan_id, limit=settings.COMPARISON_LIMIT)
    except ComparisonLimitError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/saved", response_model=SessionState)
async def update_saved_loans(
    payload: SessionActionRequest,
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    if payload.action == ListActionEnum.clear:
        return session_service.clear_saved_loans(payload.state)

    loan_id = _require_loan_id(payload, catalog)
    if payload.action == ListActionEnum.remove:
        return session_service.remove_saved_loan(payload.state, loan_id)
    return session_service.save_loan(payload.state, loan_id)


@router.post("/profile", response_model=SessionState)
async def remember_profile(state: SessionState, profile: UserProfile):
    return session_service.set_user_profile(state, profile)

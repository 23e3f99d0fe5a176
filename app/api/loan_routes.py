from fastapi import APIRouter, HTTPException, Depends, Query, Request, BackgroundTasks
from fastapi import status
from pydantic import ValidationError
from typing import List, Optional
import logging

from app.core.config import settings
from app.schemas.loan_schema import (
    Loan,
    LoanFilters,
    LoanCategory,
    LenderType,
    LoanSortField,
    LoanFacets,
    UserProfile,
    EligibilityResult,
    EligibilityCheckResponse,
    CompareRequest,
    ComparisonResponse,
)
from app.schemas.tracking_schema import ApplyRequest, ApplyResponse
from app.services.loan_catalog_service import LoanCatalogService, LoanNotFoundError, loan_catalog_service
from app.services.loan_filter_service import filter_loans, search_loans, sort_loans
from app.services.eligibility_service import calculate_eligibility_score, rank_eligible_loans
from app.services.comparison_service import (
    ComparisonLimitError,
    normalize_selection,
    compare_loans,
    best_value_indicators,
    build_comparison_table,
)
from app.services.tracking_service import TrackingService, record_click

logger = logging.getLogger(__name__)

# Returns the catalog service instance or raises an error if unavailable
def get_loan_catalog_service() -> LoanCatalogService:
    if loan_catalog_service is None:
        logger.error("Loan catalog service is not initialized")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Loan catalog is not available. Please contact system administrator."
        )

    return loan_catalog_service


def _get_loan_or_404(catalog: LoanCatalogService, loan_id: str) -> Loan:
    try:
        return catalog.get_loan(loan_id)
    except LoanNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


router = APIRouter(prefix="/loans", tags=["Loans"])

# Lists catalog loans narrowed by the given filters, optionally sorted
@router.get("", response_model=List[Loan])
async def list_loans(
    country: Optional[str] = Query(default=None, description="Country, case-insensitive"),
    category: Optional[LoanCategory] = Query(default=None),
    lender_type: Optional[LenderType] = Query(default=None, alias="lenderType"),
    min_amount: Optional[float] = Query(default=None, alias="minAmount", ge=0),
    max_amount: Optional[float] = Query(default=None, alias="maxAmount", ge=0),
    max_interest_rate: Optional[float] = Query(default=None, alias="maxInterestRate", gt=0, le=100),
    collateral_free: Optional[bool] = Query(default=None, alias="collateralFree"),
    search: Optional[str] = Query(default=None, max_length=100),
    sort_by: Optional[LoanSortField] = Query(default=None, alias="sortBy"),
    order: str = Query(default="asc", pattern="^(asc|desc)$"),
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    try:
        filters = LoanFilters(
            country=country,
            category=category,
            lender_type=lender_type,
            min_amount=min_amount,
            max_amount=max_amount,
            max_interest_rate=max_interest_rate,
            collateral_free=collateral_free,
            search=search,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid loan filters: {e.errors()[0]['msg']}"
        )

    loans = filter_loans(catalog.loans, filters)
    if sort_by:
        loans = sort_loans(loans, sort_by, descending=(order == "desc"))
    return loans

# Free-text search across every descriptive loan field
@router.get("/search", response_model=List[Loan])
async def search_catalog(
    q: Optional[str] = Query(default=None, max_length=100, description="Search text, at least 2 characters"),
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    return search_loans(catalog.loans, q)

# Distinct values for building filter controls
@router.get("/facets", response_model=LoanFacets)
async def get_loan_facets(catalog: LoanCatalogService = Depends(get_loan_catalog_service)):
    return catalog.get_facets()

# Checks a profile against the whole catalog and ranks the loans it qualifies for
@router.post("/eligibility", response_model=EligibilityCheckResponse)
async def check_eligibility(
    profile: UserProfile,
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    loans = catalog.loans
    if profile.country:
        loans = filter_loans(loans, LoanFilters(country=profile.country))

    results = rank_eligible_loans(loans, profile)
    logger.info(f"Eligibility check matched {len(results)} of {len(loans)} loans")

    return EligibilityCheckResponse(
        profile=profile,
        total_checked=len(loans),
        eligible_count=len(results),
        results=results,
    )

# Side-by-side comparison of a small selection of loans
@router.post("/compare", response_model=ComparisonResponse)
async def compare_selected_loans(
    request_data: CompareRequest,
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    try:
        loan_ids = normalize_selection(request_data.loan_ids, settings.COMPARISON_LIMIT)
        loans = catalog.get_loans_by_ids(loan_ids)
    except ComparisonLimitError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except LoanNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ComparisonResponse(
        loans=loans,
        summary=compare_loans(loans),
        best_values=best_value_indicators(loans),
        table=build_comparison_table(loans),
    )

# Retrieves a single catalog loan
@router.get("/{loan_id}", response_model=Loan)
async def get_loan(
    loan_id: str,
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    return _get_loan_or_404(catalog, loan_id)

# Scores one loan for a profile, including the reasons for any failed check
@router.post("/{loan_id}/eligibility", response_model=EligibilityResult)
async def score_loan_eligibility(
    loan_id: str,
    profile: UserProfile,
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    loan = _get_loan_or_404(catalog, loan_id)
    return calculate_eligibility_score(loan, profile)

# Hands back the lender URL and records the click without waiting on storage
@router.post("/{loan_id}/apply", response_model=ApplyResponse)
async def apply_for_loan(
    loan_id: str,
    request: Request,
    background_tasks: BackgroundTasks,
    request_data: Optional[ApplyRequest] = None,
    catalog: LoanCatalogService = Depends(get_loan_catalog_service)
):
    loan = _get_loan_or_404(catalog, loan_id)
    request_data = request_data or ApplyRequest()

    try:
        event = TrackingService.build_click_event(
            loan,
            session_id=request_data.session_id,
            referrer=request_data.referrer or request.headers.get("referer"),
            requested_amount=request_data.requested_amount,
        )
    except ValueError as e:
        # pydantic.ValidationError is a ValueError; the redirect URL is returned regardless
        logger.error(f"Could not build click event for loan {loan.id}: {e}")
        event = None

    if event is not None:
        background_tasks.add_task(
            record_click,
            event,
            request.client.host if request.client else None,
            request.headers.get("user-agent", ""),
        )

    return ApplyResponse(
        loan_id=loan.id,
        application_url=loan.application_url,
        tracking_scheduled=event is not None,
    )

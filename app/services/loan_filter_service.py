import logging
from typing import List, Optional, Sequence

from app.schemas.loan_schema import Loan, LoanFilters, LoanSortField
from app.utils.loan_parsing import parse_leading_number

logger = logging.getLogger(__name__)

SEARCH_MIN_LENGTH = 2


def _filter_search_text(loan: Loan) -> str:
    return " ".join([
        loan.name,
        loan.lender,
        loan.description,
        loan.category.value,
        *loan.benefits,
        *loan.features,
    ]).lower()


def _full_search_text(loan: Loan) -> str:
    return " ".join([
        loan.name,
        loan.lender,
        loan.description,
        loan.category.value,
        loan.country,
        *loan.benefits,
        *loan.features,
        *loan.documents,
    ]).lower()


def _matches_filters(loan: Loan, filters: LoanFilters) -> bool:
    if filters.country and loan.country.lower() != filters.country.lower():
        return False

    if filters.category and loan.category != filters.category:
        return False

    if filters.lender_type and loan.lender_type != filters.lender_type:
        return False

    # Keep loans whose floor is at or below the requested floor
    if filters.min_amount and loan.loan_amount.min > filters.min_amount:
        return False

    if filters.max_amount and loan.loan_amount.max < filters.max_amount:
        return False

    if filters.max_interest_rate is not None:
        rate = parse_leading_number(loan.interest_rate)
        if rate is None or rate > filters.max_interest_rate:
            return False

    if filters.collateral_free is True and loan.collateral:
        return False

    if filters.search and len(filters.search) >= SEARCH_MIN_LENGTH:
        if filters.search.lower() not in _filter_search_text(loan):
            return False

    return True


def filter_loans(catalog: Sequence[Loan], filters: LoanFilters) -> List[Loan]:
    """Reduce the catalog to loans matching every filter, keeping catalog order."""
    result = [loan for loan in catalog if _matches_filters(loan, filters)]
    logger.debug(f"filter_loans kept {len(result)} of {len(catalog)} loans")
    return result


def search_loans(catalog: Sequence[Loan], query: Optional[str]) -> List[Loan]:
    """Free-text search over every descriptive field including country and documents.

    Queries shorter than two characters (after trimming) return the catalog as is.
    """
    if not query or len(query.strip()) < SEARCH_MIN_LENGTH:
        return list(catalog)

    term = query.strip().lower()
    return [loan for loan in catalog if term in _full_search_text(loan)]


def sort_loans(
    loans: Sequence[Loan],
    sort_by: LoanSortField,
    descending: bool = False,
) -> List[Loan]:
    if sort_by == LoanSortField.interest_rate:
        # Unparsable rates sort after every parsed rate in either direction
        parsed = [l for l in loans if parse_leading_number(l.interest_rate) is not None]
        unparsed = [l for l in loans if parse_leading_number(l.interest_rate) is None]
        ordered = sorted(parsed, key=lambda l: parse_leading_number(l.interest_rate), reverse=descending)
        return ordered + unparsed

    if sort_by == LoanSortField.name:
        key = lambda l: l.name.lower()
    elif sort_by == LoanSortField.loan_amount:
        key = lambda l: l.loan_amount.max
    elif sort_by == LoanSortField.processing_time:
        key = lambda l: l.processing_time
    else:
        raise ValueError(f"Unsupported sort field: {sort_by}")

    return sorted(loans, key=key, reverse=descending)

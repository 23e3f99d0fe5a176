import logging
from typing import Callable, List, Optional, Sequence

from app.schemas.loan_schema import (
    Loan,
    ComparisonSummary,
    BestValueIndicators,
    ComparisonRow,
)
from app.utils.loan_parsing import (
    parse_leading_number,
    format_loan_amount,
    format_interest_rate,
    format_processing_time,
)

logger = logging.getLogger(__name__)


class ComparisonLimitError(ValueError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"At most {limit} loans can be compared at once")


def normalize_selection(loan_ids: Sequence[str], limit: int) -> List[str]:
    """Drop repeated ids (first occurrence wins) and enforce the selection limit."""
    selection = list(dict.fromkeys(loan_ids))
    if len(selection) > limit:
        raise ComparisonLimitError(limit)
    return selection


def _arg_best(values: Sequence[Optional[float]], better: Callable[[float, float], bool]) -> Optional[int]:
    # First index wins ties; None values never win
    best_index = None
    for index, value in enumerate(values):
        if value is None:
            continue
        if best_index is None or better(value, values[best_index]):
            best_index = index
    return best_index


def _lower(a: float, b: float) -> bool:
    return a < b

def _higher(a: float, b: float) -> bool:
    return a > b


def compare_loans(loans: Sequence[Loan]) -> ComparisonSummary:
    """Pick the per-field winners across a small selection of loans.

    fastest_processing is the loan with the shortest processing_time text;
    this is a rough proxy for duration, not parsed time.
    """
    if not loans:
        return ComparisonSummary()

    rate_index = _arg_best([parse_leading_number(loan.interest_rate) for loan in loans], _lower)
    amount_index = _arg_best([loan.loan_amount.max for loan in loans], _higher)
    fastest_index = _arg_best([len(loan.processing_time) for loan in loans], _lower)

    return ComparisonSummary(
        best_interest_rate=loans[rate_index] if rate_index is not None else None,
        highest_amount=loans[amount_index],
        fastest_processing=loans[fastest_index],
        no_collateral=[loan for loan in loans if not loan.collateral],
    )


def best_value_indicators(loans: Sequence[Loan]) -> BestValueIndicators:
    if not loans:
        return BestValueIndicators()

    return BestValueIndicators(
        interest_rate=_arg_best([parse_leading_number(loan.interest_rate) for loan in loans], _lower),
        processing_fee=_arg_best([parse_leading_number(loan.processing_fee) for loan in loans], _lower),
        max_amount=_arg_best([loan.loan_amount.max for loan in loans], _higher),
    )


def _repayment_label(loan: Loan) -> str:
    if loan.repayment_term.is_grant:
        return "Grant (no repayment)"
    return f"{loan.repayment_term.min}-{loan.repayment_term.max} months"


def build_comparison_table(loans: Sequence[Loan]) -> List[ComparisonRow]:
    """Rows for the side-by-side view, one cell per selected loan."""
    best = best_value_indicators(loans)

    return [
        ComparisonRow(field="lender", label="Lender",
                      values=[loan.lender for loan in loans]),
        ComparisonRow(field="lenderType", label="Lender Type",
                      values=[loan.lender_type.value for loan in loans]),
        ComparisonRow(field="interestRate", label="Interest Rate",
                      values=[format_interest_rate(loan.interest_rate) for loan in loans],
                      best_index=best.interest_rate),
        ComparisonRow(field="loanAmount", label="Loan Amount",
                      values=[f"{format_loan_amount(loan.loan_amount.min)} - {format_loan_amount(loan.loan_amount.max)}"
                              for loan in loans],
                      best_index=best.max_amount),
        ComparisonRow(field="repaymentTerm", label="Repayment Term",
                      values=[_repayment_label(loan) for loan in loans]),
        ComparisonRow(field="processingFee", label="Processing Fee",
                      values=[loan.processing_fee for loan in loans],
                      best_index=best.processing_fee),
        ComparisonRow(field="processingTime", label="Processing Time",
                      values=[format_processing_time(loan.processing_time) for loan in loans]),
        ComparisonRow(field="collateral", label="Collateral",
                      values=["Required" if loan.collateral else "Not required" for loan in loans]),
    ]

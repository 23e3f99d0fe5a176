"""
Pure transitions over a caller-owned SessionState (comparison list, saved
loans, last eligibility profile). Each function returns a new state and
leaves its input untouched.
"""

import logging

from app.core.config import settings
from app.schemas.loan_schema import UserProfile
from app.schemas.session_schema import SessionState
from app.services.comparison_service import ComparisonLimitError

logger = logging.getLogger(__name__)


def add_to_comparison(state: SessionState, loan_id: str, limit: int = settings.COMPARISON_LIMIT) -> SessionState:
    if loan_id in state.comparison_list:
        return state.model_copy(deep=True)
    if len(state.comparison_list) >= limit:
        raise ComparisonLimitError(limit)
    return state.model_copy(update={"comparison_list": [*state.comparison_list, loan_id]}, deep=True)


def remove_from_comparison(state: SessionState, loan_id: str) -> SessionState:
    remaining = [existing for existing in state.comparison_list if existing != loan_id]
    return state.model_copy(update={"comparison_list": remaining}, deep=True)


def clear_comparison(state: SessionState) -> SessionState:
    return state.model_copy(update={"comparison_list": []}, deep=True)


def save_loan(state: SessionState, loan_id: str) -> SessionState:
    if loan_id in state.saved_loans:
        return state.model_copy(deep=True)
    return state.model_copy(update={"saved_loans": [*state.saved_loans, loan_id]}, deep=True)


def remove_saved_loan(state: SessionState, loan_id: str) -> SessionState:
    remaining = [existing for existing in state.saved_loans if existing != loan_id]
    return state.model_copy(update={"saved_loans": remaining}, deep=True)


def clear_saved_loans(state: SessionState) -> SessionState:
    return state.model_copy(update={"saved_loans": []}, deep=True)


def set_user_profile(state: SessionState, profile: UserProfile) -> SessionState:
    return state.model_copy(update={"user_profile": profile}, deep=True)

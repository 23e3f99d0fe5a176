import pytest

from app.schemas.session_schema import SessionState
from app.services import session_service
from app.services.comparison_service import ComparisonLimitError


def test_add_to_comparison_returns_new_state():
    state = SessionState()

    updated = session_service.add_to_comparison(state, "a")

    assert updated.comparison_list == ["a"]
    assert state.comparison_list == []


def test_adding_twice_keeps_single_entry():
    state = session_service.add_to_comparison(SessionState(), "a")

    assert session_service.add_to_comparison(state, "a").comparison_list == ["a"]


def test_comparison_limit():
    state = SessionState(comparison_list=["a", "b", "c", "d"])

    with pytest.raises(ComparisonLimitError):
        session_service.add_to_comparison(state, "e", limit=4)

    # an id already selected is still accepted at the limit
    assert session_service.add_to_comparison(state, "d", limit=4).comparison_list == ["a", "b", "c", "d"]


def test_remove_and_clear_comparison():
    state = SessionState(comparison_list=["a", "b"])

    assert session_service.remove_from_comparison(state, "a").comparison_list == ["b"]
    assert session_service.remove_from_comparison(state, "missing").comparison_list == ["a", "b"]
    assert session_service.clear_comparison(state).comparison_list == []
    assert state.comparison_list == ["a", "b"]


def test_saved_loans():
    state = session_service.save_loan(SessionState(), "a")
    state = session_service.save_loan(state, "b")
    state = session_service.save_loan(state, "a")

    assert state.saved_loans == ["a", "b"]
    assert session_service.remove_saved_loan(state, "a").saved_loans == ["b"]
    assert session_service.clear_saved_loans(state).saved_loans == []


def test_set_user_profile_leaves_lists_alone(sme_profile):
    state = SessionState(comparison_list=["a"], saved_loans=["b"])

    updated = session_service.set_user_profile(state, sme_profile)

    assert updated.user_profile == sme_profile
    assert updated.comparison_list == ["a"]
    assert updated.saved_loans == ["b"]
    assert state.user_profile is None

import pytest
from pydantic import ValidationError

from app.schemas.loan_schema import LoanFilters, LoanSortField, LoanCategory, LenderType
from app.services.loan_filter_service import filter_loans, search_loans, sort_loans


@pytest.fixture
def catalog(make_loan):
    return [
        make_loan(id="a", name="Alpha Startup Loan", category="startup", lenderType="government",
                  interestRate="8.5-12%", loanAmount={"min": 10000, "max": 50000},
                  benefits=["No collateral required"]),
        make_loan(id="b", name="Bravo SME Loan", interestRate="14%", collateral=True,
                  loanAmount={"min": 500000, "max": 5000000}, documents=["GST returns"]),
        make_loan(id="c", name="Charlie Grant", category="ngo", lenderType="private",
                  interestRate="Nil", country="United States",
                  loanAmount={"min": 100000, "max": 2000000}),
    ]


def _ids(loans):
    return [loan.id for loan in loans]


def test_no_filters_returns_catalog_in_order(catalog):
    assert _ids(filter_loans(catalog, LoanFilters())) == ["a", "b", "c"]


def test_result_is_ordered_subset_and_idempotent(catalog):
    filters = LoanFilters(country="india", collateral_free=True)
    once = filter_loans(catalog, filters)

    assert _ids(once) == ["a"]
    assert _ids(filter_loans(once, filters)) == _ids(once)


def test_country_match_is_case_insensitive(catalog):
    assert _ids(filter_loans(catalog, LoanFilters(country="UNITED STATES"))) == ["c"]


def test_category_and_lender_type(catalog):
    assert _ids(filter_loans(catalog, LoanFilters(category=LoanCategory.startup))) == ["a"]
    assert _ids(filter_loans(catalog, LoanFilters(lender_type=LenderType.bank))) == ["b"]


def test_amount_filters_check_the_loan_range_bounds(catalog):
    # a loan qualifies when its floor is at or below the requested minimum
    assert _ids(filter_loans(catalog, LoanFilters(min_amount=100000))) == ["a", "c"]
    # and when its ceiling reaches the requested maximum
    assert _ids(filter_loans(catalog, LoanFilters(max_amount=3000000))) == ["b"]


def test_zero_amount_filters_are_ignored(catalog):
    assert _ids(filter_loans(catalog, LoanFilters(min_amount=0, max_amount=0))) == ["a", "b", "c"]


def test_max_interest_rate_excludes_unparsable_rates(catalog):
    assert _ids(filter_loans(catalog, LoanFilters(max_interest_rate=10))) == ["a"]
    assert _ids(filter_loans(catalog, LoanFilters(max_interest_rate=20))) == ["a", "b"]


def test_search_filter_needs_two_characters(catalog):
    assert _ids(filter_loans(catalog, LoanFilters(search="a"))) == ["a", "b", "c"]
    assert _ids(filter_loans(catalog, LoanFilters(search="COLLATERAL"))) == ["a"]


def test_amount_range_validation():
    with pytest.raises(ValidationError):
        LoanFilters(min_amount=500000, max_amount=100000)


def test_search_loans_covers_country_and_documents(catalog):
    assert _ids(search_loans(catalog, "gst")) == ["b"]
    assert _ids(search_loans(catalog, "  united  ")) == ["c"]


@pytest.mark.parametrize("query", [None, "", " ", "x"])
def test_short_search_returns_everything(catalog, query):
    assert _ids(search_loans(catalog, query)) == ["a", "b", "c"]


def test_sort_by_interest_rate_puts_unparsable_last(catalog):
    ascending = sort_loans(catalog, LoanSortField.interest_rate)
    descending = sort_loans(catalog, LoanSortField.interest_rate, descending=True)

    assert _ids(ascending) == ["a", "b", "c"]
    assert _ids(descending) == ["b", "a", "c"]


def test_sort_by_amount_and_name(catalog):
    assert _ids(sort_loans(catalog, LoanSortField.loan_amount, descending=True)) == ["b", "c", "a"]
    assert _ids(sort_loans(list(reversed(catalog)), LoanSortField.name)) == ["a", "b", "c"]


def test_search_threshold_is_fixed_at_two_characters(catalog):
    from app.core.config import settings
    import app.services.loan_filter_service as filter_module

    assert filter_module.SEARCH_MIN_LENGTH == 2
    assert not hasattr(settings, "SEARCH_MIN_LENGTH")
    assert _ids(search_loans(catalog, "gs")) == ["b"]

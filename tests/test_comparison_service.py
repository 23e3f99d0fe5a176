import pytest

from app.services.comparison_service import (
    ComparisonLimitError,
    normalize_selection,
    compare_loans,
    best_value_indicators,
    build_comparison_table,
)


def test_empty_selection_has_no_winners():
    summary = compare_loans([])

    assert summary.best_interest_rate is None
    assert summary.highest_amount is None
    assert summary.fastest_processing is None
    assert summary.no_collateral == []
    assert best_value_indicators([]).interest_rate is None


def test_single_loan_wins_everything(make_loan):
    loan = make_loan()
    summary = compare_loans([loan])

    assert summary.best_interest_rate == loan
    assert summary.highest_amount == loan
    assert summary.fastest_processing == loan
    assert summary.no_collateral == [loan]


def test_lowest_leading_rate_wins(make_loan):
    a = make_loan(id="a", interestRate="8.5%")
    b = make_loan(id="b", interestRate="10-12%")

    assert compare_loans([a, b]).best_interest_rate == a
    assert compare_loans([b, a]).best_interest_rate == a


def test_unparsable_rate_never_wins(make_loan):
    a = make_loan(id="a", interestRate="Contact lender")
    b = make_loan(id="b", interestRate="18%")

    assert compare_loans([a, b]).best_interest_rate == b
    assert compare_loans([a]).best_interest_rate is None


def test_summary_picks(make_loan):
    small = make_loan(id="small", loanAmount={"min": 1000, "max": 50000}, processingTime="48 hours",
                      collateral=True)
    large = make_loan(id="large", loanAmount={"min": 1000, "max": 9000000}, processingTime="2-3 weeks")

    summary = compare_loans([small, large])

    assert summary.highest_amount == large
    assert summary.fastest_processing == small
    assert summary.no_collateral == [large]


def test_best_value_indicators_point_at_winning_cells(make_loan):
    loans = [
        make_loan(id="a", interestRate="12%", processingFee="Nil", loanAmount={"min": 1000, "max": 500000}),
        make_loan(id="b", interestRate="9%", processingFee="2%", loanAmount={"min": 1000, "max": 100000}),
        make_loan(id="c", interestRate="9%", processingFee="0.5%", loanAmount={"min": 1000, "max": 500000}),
    ]

    best = best_value_indicators(loans)

    assert best.interest_rate == 1
    assert best.processing_fee == 2
    assert best.max_amount == 0


def test_comparison_table_rows(make_loan):
    loans = [
        make_loan(id="a", interestRate="8.50%", collateral=True, processingTime="72 hours"),
        make_loan(id="b", interestRate="10-12%", repaymentTerm={"min": 0, "max": 0}),
    ]

    table = {row.field: row for row in build_comparison_table(loans)}

    assert list(table) == [
        "lender", "lenderType", "interestRate", "loanAmount",
        "repaymentTerm", "processingFee", "processingTime", "collateral",
    ]
    assert table["interestRate"].values == ["8.5%", "10-12%"]
    assert table["interestRate"].best_index == 0
    assert table["loanAmount"].values == ["₹1.0L - ₹10.0L", "₹1.0L - ₹10.0L"]
    assert table["repaymentTerm"].values == ["12-60 months", "Grant (no repayment)"]
    assert table["processingTime"].values == ["72 hrs", "7 days"]
    assert table["collateral"].values == ["Required", "Not required"]
    assert table["lender"].best_index is None


def test_normalize_selection_dedupes_in_order():
    assert normalize_selection(["a", "b", "a", "c"], limit=4) == ["a", "b", "c"]


def test_normalize_selection_enforces_limit():
    with pytest.raises(ComparisonLimitError) as exc_info:
        normalize_selection(["a", "b", "c", "d", "e"], limit=4)

    assert exc_info.value.limit == 4

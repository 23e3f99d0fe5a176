import pytest

from app.schemas.loan_schema import UserProfile
from app.services.eligibility_service import (
    is_eligible,
    filter_loans_by_eligibility,
    calculate_eligibility_score,
    rank_eligible_loans,
)


def test_matching_profile_is_eligible_with_high_score(make_loan, sme_profile):
    result = calculate_eligibility_score(make_loan(), sme_profile)

    assert result.eligible is True
    assert result.score >= 95
    assert result.reasons == []


def test_wrong_organization_type_is_reported(make_loan, sme_profile):
    loan = make_loan(eligibility={"organizationType": ["startup"]})

    result = calculate_eligibility_score(loan, sme_profile)

    assert result.eligible is False
    assert "Organization type must be: startup" in result.reasons


def test_every_failed_check_gets_a_reason(make_loan):
    profile = UserProfile(age=17, income=1000, credit_score=400, organization_type="ngo",
                          business_age=0, sector="retail")

    result = calculate_eligibility_score(make_loan(), profile)

    assert result.eligible is False
    assert result.score == 0
    assert result.reasons == [
        "Age must be between 21 and 60",
        "Minimum income required: 500,000",
        "Minimum credit score required: 700",
        "Organization type must be: sme",
        "Business must be at least 1 years old",
        "Business sector must be: technology, fintech",
    ]


def test_sector_wildcard_accepts_any_sector(make_loan, sme_profile):
    loan = make_loan(eligibility={"sector": ["all"]})
    profile = sme_profile.model_copy(update={"sector": "retail"})

    assert is_eligible(loan, profile)


def test_bonuses_are_capped_and_score_stays_in_range(make_loan):
    loan = make_loan(eligibility={"minIncome": 1, "creditScoreMin": 300})
    profile = UserProfile(age=30, income=10_000_000, credit_score=850, organization_type="sme",
                          business_age=100, sector="technology")

    assert calculate_eligibility_score(loan, profile).score == 100


def test_no_income_bonus_when_loan_has_no_minimum(make_loan, sme_profile):
    loan = make_loan(eligibility={"minIncome": 0, "creditScoreMin": 750})

    # 20 + 25 + 20 + 15 + 10 + 10, no bonuses
    assert calculate_eligibility_score(loan, sme_profile).score == 100
    assert calculate_eligibility_score(loan, sme_profile).eligible is True


def test_partial_score_for_ineligible_loan(make_loan, sme_profile):
    loan = make_loan(eligibility={"minIncome": 0, "creditScoreMin": 750, "organizationType": ["ngo"]})

    result = calculate_eligibility_score(loan, sme_profile)

    assert result.eligible is False
    assert result.score == 85


def test_empty_catalog_yields_nothing(sme_profile):
    assert filter_loans_by_eligibility([], sme_profile) == []
    assert rank_eligible_loans([], sme_profile) == []


def test_eligible_flag_agrees_with_filter(make_loan, sme_profile):
    catalog = [
        make_loan(id="ok"),
        make_loan(id="too-young-business", eligibility={"businessAge": 36}),
        make_loan(id="wrong-sector", eligibility={"sector": ["agriculture"]}),
        make_loan(id="ok-too", eligibility={"creditScoreMin": 0}),
    ]

    eligible_ids = [loan.id for loan in filter_loans_by_eligibility(catalog, sme_profile)]

    assert eligible_ids == ["ok", "ok-too"]
    for loan in catalog:
        assert calculate_eligibility_score(loan, sme_profile).eligible == (loan.id in eligible_ids)


def test_ranking_keeps_only_eligible_loans_and_marks_top_match(make_loan, sme_profile):
    catalog = [
        make_loan(id="close-fit", eligibility={"minIncome": 600000, "creditScoreMin": 750}),
        make_loan(id="ineligible", eligibility={"organizationType": ["farmer"]}),
        make_loan(id="comfortable-fit", eligibility={"minIncome": 100000, "creditScoreMin": 300}),
    ]

    ranked = rank_eligible_loans(catalog, sme_profile)

    assert [item.loan.id for item in ranked] == ["close-fit", "comfortable-fit"]
    # every satisfied check already adds up to the maximum
    assert [item.score for item in ranked] == [100, 100]
    assert [item.is_top_match for item in ranked] == [True, False]


def test_ranking_ties_keep_catalog_order(make_loan, sme_profile):
    catalog = [make_loan(id="first"), make_loan(id="second")]

    assert [item.loan.id for item in rank_eligible_loans(catalog, sme_profile)] == ["first", "second"]


@pytest.mark.parametrize("age", [21, 60])
def test_age_bounds_are_inclusive(make_loan, sme_profile, age):
    profile = sme_profile.model_copy(update={"age": age})
    assert is_eligible(make_loan(), profile)

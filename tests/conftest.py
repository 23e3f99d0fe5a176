import copy

import pytest

from app.schemas.loan_schema import Loan, UserProfile


BASE_LOAN = {
    "id": "test-loan",
    "name": "Test Business Loan",
    "lender": "Test Bank",
    "lenderType": "bank",
    "category": "sme",
    "country": "India",
    "interestRate": "10%",
    "loanAmount": {"min": 100000, "max": 1000000},
    "repaymentTerm": {"min": 12, "max": 60},
    "processingFee": "1%",
    "collateral": False,
    "eligibility": {
        "minAge": 21,
        "maxAge": 60,
        "minIncome": 500000,
        "creditScoreMin": 700,
        "organizationType": ["sme"],
        "businessAge": 12,
        "sector": ["technology", "fintech"],
    },
    "description": "Working capital for small businesses",
    "benefits": ["Quick approval"],
    "features": ["Online application"],
    "documents": ["PAN Card"],
    "processingTime": "7 days",
    "applicationUrl": "https://example.com/apply",
}


def _merge(base, overrides):
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def build_loan(**overrides) -> Loan:
    """Catalog loan from BASE_LOAN with camelCase overrides merged in (nested dicts merge)."""
    return Loan.model_validate(_merge(copy.deepcopy(BASE_LOAN), overrides))


@pytest.fixture
def make_loan():
    return build_loan


@pytest.fixture
def sme_profile():
    return UserProfile(
        age=30,
        income=600000,
        credit_score=750,
        organization_type="sme",
        business_age=24,
        sector="technology",
    )

"""
Eligibility checks and match scoring for a user profile against catalog loans.

A loan has six hard constraints (age, income, credit score, organization type,
business age, sector). filter_loans_by_eligibility keeps loans where all six
hold. calculate_eligibility_score runs the same six checks but always
evaluates every one of them, so an ineligible loan still gets a score that
says how close the applicant is, together with the list of failed checks.
"""

import logging
import math
from typing import List, Sequence

from app.schemas.loan_schema import (
    Loan,
    Eligibility,
    UserProfile,
    EligibilityResult,
    ScoredLoan,
    SECTOR_WILDCARD,
)

logger = logging.getLogger(__name__)

MAX_SCORE = 100

AGE_POINTS = 20
INCOME_POINTS = 25
CREDIT_SCORE_POINTS = 20
ORGANIZATION_POINTS = 15
BUSINESS_AGE_POINTS = 10
SECTOR_POINTS = 10

MAX_INCOME_BONUS = 5
MAX_CREDIT_BONUS = 5
CREDIT_POINTS_PER_BONUS = 50


def _age_ok(rules: Eligibility, profile: UserProfile) -> bool:
    return rules.min_age <= profile.age <= rules.max_age

def _income_ok(rules: Eligibility, profile: UserProfile) -> bool:
    return profile.income >= rules.min_income

def _credit_score_ok(rules: Eligibility, profile: UserProfile) -> bool:
    return profile.credit_score >= rules.credit_score_min

def _organization_ok(rules: Eligibility, profile: UserProfile) -> bool:
    return profile.organization_type in rules.organization_type

def _business_age_ok(rules: Eligibility, profile: UserProfile) -> bool:
    return profile.business_age >= rules.business_age

def _sector_ok(rules: Eligibility, profile: UserProfile) -> bool:
    return profile.sector in rules.sector or SECTOR_WILDCARD in rules.sector


def is_eligible(loan: Loan, profile: UserProfile) -> bool:
    rules = loan.eligibility
    return (
        _age_ok(rules, profile)
        and _income_ok(rules, profile)
        and _credit_score_ok(rules, profile)
        and _organization_ok(rules, profile)
        and _business_age_ok(rules, profile)
        and _sector_ok(rules, profile)
    )


def filter_loans_by_eligibility(catalog: Sequence[Loan], profile: UserProfile) -> List[Loan]:
    """Loans whose every hard constraint the profile satisfies, in catalog order."""
    eligible = [loan for loan in catalog if is_eligible(loan, profile)]
    logger.info(f"{len(eligible)} of {len(catalog)} loans eligible for profile "
                f"(organization_type={profile.organization_type.value}, sector={profile.sector})")
    return eligible


def _format_amount(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_eligibility_score(loan: Loan, profile: UserProfile) -> EligibilityResult:
    rules = loan.eligibility
    score = 0.0
    eligible = True
    reasons: List[str] = []

    if _age_ok(rules, profile):
        score += AGE_POINTS
    else:
        eligible = False
        reasons.append(f"Age must be between {rules.min_age} and {rules.max_age}")

    if _income_ok(rules, profile):
        score += INCOME_POINTS
        if rules.min_income > 0:
            score += min(MAX_INCOME_BONUS, profile.income / rules.min_income - 1)
    else:
        eligible = False
        reasons.append(f"Minimum income required: {_format_amount(rules.min_income)}")

    if _credit_score_ok(rules, profile):
        score += CREDIT_SCORE_POINTS
        score += min(MAX_CREDIT_BONUS, (profile.credit_score - rules.credit_score_min) / CREDIT_POINTS_PER_BONUS)
    else:
        eligible = False
        reasons.append(f"Minimum credit score required: {rules.credit_score_min}")

    if _organization_ok(rules, profile):
        score += ORGANIZATION_POINTS
    else:
        eligible = False
        allowed = ", ".join(org.value for org in rules.organization_type)
        reasons.append(f"Organization type must be: {allowed}")

    if _business_age_ok(rules, profile):
        score += BUSINESS_AGE_POINTS
    else:
        eligible = False
        years_required = math.ceil(rules.business_age / 12)
        reasons.append(f"Business must be at least {years_required} years old")

    if _sector_ok(rules, profile):
        score += SECTOR_POINTS
    else:
        eligible = False
        reasons.append(f"Business sector must be: {', '.join(rules.sector)}")

    return EligibilityResult(
        score=max(0, min(MAX_SCORE, _round_half_up(score))),
        eligible=eligible,
        reasons=reasons,
    )


def rank_eligible_loans(catalog: Sequence[Loan], profile: UserProfile) -> List[ScoredLoan]:
    """Eligible loans ordered best match first; ties keep catalog order."""
    scored = [
        (loan, calculate_eligibility_score(loan, profile).score)
        for loan in filter_loans_by_eligibility(catalog, profile)
    ]
    scored.sort(key=lambda item: item[1], reverse=True)

    return [
        ScoredLoan(loan=loan, score=score, is_top_match=(i == 0))
        for i, (loan, score) in enumerate(scored)
    ]

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from enum import Enum
from typing import List, Optional


class CamelModel(BaseModel):
    """Base for catalog-facing models: snake_case in Python, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class LenderType(str, Enum):
    government = "government"
    bank = "bank"
    nbfc = "nbfc"
    private = "private"
    fintech = "fintech"
    other = "other"

class LoanCategory(str, Enum):
    startup = "startup"
    sme = "sme"
    ngo = "ngo"
    education = "education"
    agriculture = "agriculture"
    personal = "personal"
    home = "home"

class OrganizationType(str, Enum):
    startup = "startup"
    sme = "sme"
    ngo = "ngo"
    individual = "individual"
    institution = "institution"
    farmer = "farmer"
    cooperative = "cooperative"

class ApplicationStatus(str, Enum):
    clicked = "clicked"
    redirected = "redirected"
    completed = "completed"
    abandoned = "abandoned"

class LoanSortField(str, Enum):
    name = "name"
    interest_rate = "interestRate"
    loan_amount = "loanAmount"
    processing_time = "processingTime"


SECTOR_WILDCARD = "all"

URL_PATTERN = r"^https?://\S+$"


class LoanAmount(CamelModel):
    min: int = Field(..., gt=0)
    max: int = Field(..., gt=0)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_range(self):
        if self.max <= self.min:
            raise ValueError("loanAmount.max must be greater than loanAmount.min")
        return self

class RepaymentTerm(CamelModel):
    """Repayment window in months; {0, 0} marks a grant."""
    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_range(self):
        if self.max < self.min:
            raise ValueError("repaymentTerm.max must not be lower than repaymentTerm.min")
        return self

    @property
    def is_grant(self) -> bool:
        return self.min == 0 and self.max == 0

class Eligibility(CamelModel):
    min_age: int = Field(..., ge=16, le=100)
    max_age: int = Field(..., ge=16, le=100)
    min_income: float = Field(..., ge=0)
    credit_score_min: int = Field(0, description="0 means no credit score is required")
    organization_type: List[OrganizationType] = Field(..., min_length=1)
    business_age: int = Field(..., ge=0, description="Minimum business age in months")
    sector: List[str] = Field(..., min_length=1)

    class Config:
        frozen = True

    @field_validator("credit_score_min")
    @classmethod
    def check_credit_score_min(cls, value: int) -> int:
        if value != 0 and not 300 <= value <= 850:
            raise ValueError("creditScoreMin must be 0 or between 300 and 850")
        return value

    @model_validator(mode="after")
    def check_age_range(self):
        if self.max_age < self.min_age:
            raise ValueError("eligibility.maxAge must not be lower than eligibility.minAge")
        return self

class Loan(CamelModel):
    """A catalog entry. Loaded once and never mutated."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=3, max_length=200)
    lender: str = Field(..., min_length=2, max_length=100)
    lender_type: LenderType
    category: LoanCategory
    country: str = Field(..., min_length=2, max_length=50)
    interest_rate: str = Field(..., description="Free text, e.g. '8.5-12%'")
    loan_amount: LoanAmount
    repayment_term: RepaymentTerm
    processing_fee: str
    collateral: bool
    eligibility: Eligibility
    description: str
    benefits: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    documents: List[str] = Field(default_factory=list)
    processing_time: str
    application_url: str = Field(..., pattern=URL_PATTERN)
    last_updated: Optional[str] = None

    class Config:
        frozen = True


class UserProfile(CamelModel):
    """Applicant details submitted for an eligibility check."""
    age: int = Field(..., ge=16, le=100)
    income: float = Field(..., ge=0)
    credit_score: int = Field(..., ge=300, le=850)
    organization_type: OrganizationType
    business_age: int = Field(..., ge=0, description="Business age in months")
    sector: str = Field(..., min_length=1)
    country: Optional[str] = Field(None, min_length=2, max_length=50)
    loan_amount: Optional[float] = Field(None, gt=0, description="Requested amount")

class LoanFilters(CamelModel):
    country: Optional[str] = None
    category: Optional[LoanCategory] = None
    lender_type: Optional[LenderType] = None
    min_amount: Optional[float] = Field(None, ge=0)
    max_amount: Optional[float] = Field(None, ge=0)
    max_interest_rate: Optional[float] = Field(None, gt=0, le=100)
    collateral_free: Optional[bool] = None
    search: Optional[str] = Field(None, max_length=100)

    @model_validator(mode="after")
    def check_amount_range(self):
        if self.min_amount and self.max_amount and self.max_amount <= self.min_amount:
            raise ValueError("maxAmount must be greater than minAmount")
        return self


class EligibilityResult(CamelModel):
    score: int = Field(..., ge=0, le=100)
    eligible: bool
    reasons: List[str] = Field(default_factory=list)

class ScoredLoan(CamelModel):
    loan: Loan
    score: int
    is_top_match: bool = False

class EligibilityCheckResponse(CamelModel):
    profile: UserProfile
    total_checked: int
    eligible_count: int
    results: List[ScoredLoan]


class CompareRequest(CamelModel):
    loan_ids: List[str] = Field(..., min_length=1)

class ComparisonSummary(CamelModel):
    best_interest_rate: Optional[Loan] = None
    highest_amount: Optional[Loan] = None
    fastest_processing: Optional[Loan] = None
    no_collateral: List[Loan] = Field(default_factory=list)

class BestValueIndicators(CamelModel):
    """Index into the compared list of the winning cell for each column."""
    interest_rate: Optional[int] = None
    processing_fee: Optional[int] = None
    max_amount: Optional[int] = None

class ComparisonRow(CamelModel):
    field: str
    label: str
    values: List[str]
    best_index: Optional[int] = None

class ComparisonResponse(CamelModel):
    loans: List[Loan]
    summary: ComparisonSummary
    best_values: BestValueIndicators
    table: List[ComparisonRow]


class LoanFacets(CamelModel):
    countries: List[str]
    lenders: List[str]
    sectors: List[str]
    categories: List[LoanCategory]
    lender_types: List[LenderType]

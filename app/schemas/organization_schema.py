import re
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator, model_validator

from app.schemas.loan_schema import CamelModel, LoanCategory

MIN_LISTED_LOAN_AMOUNT = 1_000
MAX_LISTED_LOAN_AMOUNT = 100_000_000

_PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]{10,15}$")


class LenderOrganizationTypeEnum(str, Enum):
    bank = "bank"
    nbfc = "nbfc"
    credit_union = "credit_union"
    microfinance = "microfinance"
    government = "government"
    fintech = "fintech"
    cooperative = "cooperative"
    other = "other"

class SubmissionStatusEnum(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class OrganizationSubmissionRequest(CamelModel):
    """Intake form a lender fills in to be listed on the platform."""
    organization_name: str = Field(..., min_length=2, max_length=100)
    organization_type: LenderOrganizationTypeEnum
    registration_number: Optional[str] = Field(None, min_length=3, max_length=50)
    established_year: Optional[int] = Field(None, ge=1800)

    contact_person: str = Field(..., min_length=2, pattern=r"^[a-zA-Z\s.]+$")
    designation: Optional[str] = Field(None, max_length=100)
    email: EmailStr
    phone: str
    website: Optional[str] = Field(None, pattern=r"^https?://\S+$")

    address: str = Field(..., min_length=10, max_length=200)
    city: str = Field(..., min_length=2, pattern=r"^[a-zA-Z\s\-']+$")
    state: Optional[str] = None
    country: str = Field(..., min_length=2, pattern=r"^[a-zA-Z\s\-']+$")
    zip_code: Optional[str] = Field(None, pattern=r"^[a-zA-Z0-9\s\-]{3,10}$")

    loan_types: List[LoanCategory] = Field(..., min_length=1)
    min_loan_amount: Optional[int] = Field(None, ge=MIN_LISTED_LOAN_AMOUNT)
    max_loan_amount: Optional[int] = Field(None, le=MAX_LISTED_LOAN_AMOUNT)
    interest_rate_range: Optional[str] = None

    description: Optional[str] = Field(None, max_length=1000)
    special_programs: Optional[str] = Field(None, max_length=500)
    eligibility_criteria: Optional[str] = Field(None, max_length=500)

    @field_validator("organization_name", "contact_person", "address", "city", "country", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: str) -> str:
        digits = re.sub(r"[^0-9]", "", value)
        if not _PHONE_PATTERN.match(value) or not 10 <= len(digits) <= 15:
            raise ValueError("Phone number must contain 10-15 digits")
        return value

    @field_validator("established_year")
    @classmethod
    def check_established_year(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value > datetime.now().year:
            raise ValueError("establishedYear cannot be in the future")
        return value

    @model_validator(mode="after")
    def check_amount_range(self):
        if self.min_loan_amount is not None and self.max_loan_amount is not None:
            if self.min_loan_amount >= self.max_loan_amount:
                raise ValueError("minLoanAmount must be less than maxLoanAmount")
        return self

class ReviewDecisionEnum(str, Enum):
    approved = "approved"
    rejected = "rejected"

class OrganizationReviewRequest(CamelModel):
    status: ReviewDecisionEnum
    notes: Optional[str] = Field(None, max_length=1000)
    reviewer_name: str = Field(..., min_length=2, max_length=100)

class OrganizationStats(CamelModel):
    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0

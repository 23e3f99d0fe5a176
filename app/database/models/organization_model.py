from beanie import Document
from pydantic import EmailStr, Field
from typing import Optional, List
from datetime import datetime

from app.schemas.loan_schema import LoanCategory
from app.schemas.organization_schema import LenderOrganizationTypeEnum, SubmissionStatusEnum


class OrganizationSubmission(Document):
    organization_name: str = Field(..., description="Legal name of the lending organization")
    organization_type: LenderOrganizationTypeEnum = Field(..., description="Kind of lending institution")
    registration_number: Optional[str] = Field(None, description="Regulatory registration number")
    established_year: Optional[int] = Field(None, description="Year the organization was established")

    contact_person: str = Field(..., description="Primary contact")
    designation: Optional[str] = Field(None, description="Contact's role in the organization")
    email: EmailStr = Field(..., description="Contact email")
    phone: str = Field(..., description="Contact phone")
    website: Optional[str] = Field(None, description="Organization website")

    address: str = Field(..., description="Street address")
    city: str
    state: Optional[str] = None
    country: str
    zip_code: Optional[str] = None

    loan_types: List[LoanCategory] = Field(..., description="Loan categories the organization offers")
    min_loan_amount: Optional[int] = None
    max_loan_amount: Optional[int] = None
    interest_rate_range: Optional[str] = None

    description: Optional[str] = None
    special_programs: Optional[str] = None
    eligibility_criteria: Optional[str] = None

    status: SubmissionStatusEnum = Field(default=SubmissionStatusEnum.pending, description="Review status")
    review_notes: Optional[str] = None
    reviewer_name: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    submitted_at: datetime = Field(default_factory=datetime.utcnow, description="When the form was submitted")

    class Settings:
        name = "organization_submissions"
        indexes = ["status", "email"]

    class Config:
        populate_by_name = True
        json_encoders = {datetime: lambda v: v.isoformat()}

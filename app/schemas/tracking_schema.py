from pydantic import Field, field_validator
from typing import Optional

from app.schemas.loan_schema import CamelModel, LoanCategory, LenderType, ApplicationStatus, URL_PATTERN


class LoanAmountInfo(CamelModel):
    requested: Optional[float] = Field(None, gt=0)
    min: Optional[float] = Field(None, gt=0)
    max: Optional[float] = Field(None, gt=0)

class TrackApplicationRequest(CamelModel):
    """Everything the tracking backend records when a user clicks Apply."""
    loan_id: str = Field(..., min_length=1)
    loan_name: str = Field(..., min_length=3, max_length=200)
    lender: str = Field(..., min_length=2, max_length=100)
    country: str = Field(..., min_length=2, max_length=50)
    category: LoanCategory
    lender_type: LenderType
    application_url: str = Field(..., pattern=URL_PATTERN)
    session_id: Optional[str] = None
    referrer: Optional[str] = None
    loan_amount: Optional[LoanAmountInfo] = None
    interest_rate: Optional[str] = None

    @field_validator("lender_type", mode="before")
    @classmethod
    def lowercase_lender_type(cls, value):
        return value.lower() if isinstance(value, str) else value

    @field_validator("referrer", mode="before")
    @classmethod
    def blank_referrer_to_none(cls, value):
        return value or None

class UpdateStatusRequest(CamelModel):
    status: ApplicationStatus

class ApplyRequest(CamelModel):
    session_id: Optional[str] = None
    referrer: Optional[str] = None
    requested_amount: Optional[float] = Field(None, gt=0)

class ApplyResponse(CamelModel):
    loan_id: str
    application_url: str
    tracking_scheduled: bool

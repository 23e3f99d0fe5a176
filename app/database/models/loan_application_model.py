from beanie import Document
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
import pymongo

from app.schemas.loan_schema import LoanCategory, LenderType, ApplicationStatus


class LoanAmountSnapshot(BaseModel):
    requested: Optional[float] = Field(None, description="Amount the user asked for, if any")
    min: Optional[float] = Field(None, description="Loan minimum at click time")
    max: Optional[float] = Field(None, description="Loan maximum at click time")

class LoanApplication(Document):
    """A click-through to a lender's application page and its follow-up status."""
    loan_id: str = Field(..., description="Catalog id of the loan")
    loan_name: str = Field(..., description="Display name of the loan")
    lender: str = Field(..., description="Lender offering the loan")
    country: str = Field(..., description="Country the loan is offered in")
    category: LoanCategory = Field(..., description="Loan category")
    lender_type: LenderType = Field(..., description="Type of lending institution")
    application_url: str = Field(..., description="Lender URL the user was sent to")

    session_id: Optional[str] = Field(None, description="Anonymous browsing session id")
    referrer: Optional[str] = Field(None, description="Page the user came from")
    user_ip: Optional[str] = Field(None, description="Client IP address")
    user_agent: Optional[str] = Field(None, description="Client user agent")

    loan_amount: Optional[LoanAmountSnapshot] = Field(None, description="Amounts at click time")
    interest_rate: Optional[str] = Field(None, description="Interest rate text at click time")

    status: ApplicationStatus = Field(default=ApplicationStatus.clicked, description="Current tracking status")
    clicked_at: datetime = Field(default_factory=datetime.utcnow, description="When the apply button was clicked")
    redirected_at: Optional[datetime] = Field(None, description="When the user reached the lender")
    completed_at: Optional[datetime] = Field(None, description="When the application was completed")
    abandoned_at: Optional[datetime] = Field(None, description="When the application was abandoned")
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "loan_applications"
        indexes = [
            "loan_id",
            "session_id",
            [("created_at", pymongo.DESCENDING)],
            [("country", pymongo.ASCENDING), ("category", pymongo.ASCENDING)],
        ]

    class Config:
        populate_by_name = True
        json_encoders = {datetime: lambda v: v.isoformat()}

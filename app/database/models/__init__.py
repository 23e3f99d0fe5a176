from app.database.models.loan_application_model import LoanApplication
from app.database.models.organization_model import OrganizationSubmission

__all__ = ["LoanApplication", "OrganizationSubmission"]

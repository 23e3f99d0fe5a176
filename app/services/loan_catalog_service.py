import json
import logging
from typing import List, Dict, Any, Optional, Sequence, Tuple

from app.core.config import settings
from app.loan_catalog import LOAN_CATALOG
from app.schemas.loan_schema import Loan, LoanCategory, LenderType, LoanFacets

logger = logging.getLogger(__name__)


class LoanNotFoundError(ValueError):
    def __init__(self, loan_id: str):
        self.loan_id = loan_id
        super().__init__(f"Loan not found: {loan_id}")


def load_catalog_entries(catalog_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Read raw catalog entries from a JSON file, or the built-in catalog when no path is given."""
    if not catalog_path:
        return LOAN_CATALOG

    logger.info(f"Loading loan catalog from {catalog_path}")
    with open(catalog_path, "r", encoding="utf-8") as fh:
        entries = json.load(fh)

    if not isinstance(entries, list):
        raise ValueError(f"Loan catalog at {catalog_path} must be a JSON array")
    return entries


def build_catalog(entries: Sequence[Dict[str, Any]]) -> Tuple[Loan, ...]:
    loans = []
    seen_ids = set()
    for index, entry in enumerate(entries):
        loan = Loan.model_validate(entry)
        if loan.id in seen_ids:
            raise ValueError(f"Duplicate loan id in catalog at position {index}: {loan.id}")
        seen_ids.add(loan.id)
        loans.append(loan)
    return tuple(loans)


class LoanCatalogService:
    """Read-only access to the loan catalog, in stable catalog order."""

    def __init__(self, loans: Sequence[Loan]):
        self._loans: Tuple[Loan, ...] = tuple(loans)
        self._by_id: Dict[str, Loan] = {loan.id: loan for loan in self._loans}
        logger.info(f"LoanCatalogService initialized with {len(self._loans)} loans")

    @property
    def loans(self) -> List[Loan]:
        return list(self._loans)

    def get_loan(self, loan_id: str) -> Loan:
        loan = self._by_id.get(loan_id)
        if loan is None:
            raise LoanNotFoundError(loan_id)
        return loan

    # Resolves loan ids in the order given; unknown ids raise LoanNotFoundError
    def get_loans_by_ids(self, loan_ids: Sequence[str]) -> List[Loan]:
        return [self.get_loan(loan_id) for loan_id in loan_ids]

    def get_unique_countries(self) -> List[str]:
        return sorted({loan.country for loan in self._loans})

    def get_unique_lenders(self) -> List[str]:
        return sorted({loan.lender for loan in self._loans})

    def get_unique_sectors(self) -> List[str]:
        return sorted({sector for loan in self._loans for sector in loan.eligibility.sector})

    def get_facets(self) -> LoanFacets:
        return LoanFacets(
            countries=self.get_unique_countries(),
            lenders=self.get_unique_lenders(),
            sectors=self.get_unique_sectors(),
            categories=list(LoanCategory),
            lender_types=list(LenderType),
        )

    def get_service_status(self) -> Dict[str, Any]:
        return {
            "service": "loan-catalog-service",
            "status": "healthy",
            "available_loans": len(self._loans),
            "version": "1.0.0"
        }


# Initialize and return a catalog service instance
def initialize_loan_catalog_service(catalog_path: Optional[str] = None) -> Optional[LoanCatalogService]:
    try:
        logger.info("Initializing LoanCatalogService...")
        entries = load_catalog_entries(catalog_path)
        service = LoanCatalogService(build_catalog(entries))
        logger.info("LoanCatalogService initialized successfully")
        return service

    except Exception as e:
        logger.error(f"Failed to initialize LoanCatalogService: {e}")
        return None


loan_catalog_service = initialize_loan_catalog_service(settings.LOAN_CATALOG_PATH)

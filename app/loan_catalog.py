# app/loan_catalog.py

"""
This file acts as the built-in catalog of loan products listed on the platform.
Entries use the same camelCase layout as an external JSON catalog
(see LOAN_CATALOG_PATH), so either source goes through the same validation.
"""

LOAN_CATALOG = [
    {
        "id": "in-mudra-shishu",
        "name": "PM Mudra Yojana - Shishu",
        "lender": "Government of India",
        "lenderType": "government",
        "category": "startup",
        "country": "India",
        "interestRate": "8.5-12%",
        "loanAmount": {"min": 10000, "max": 50000},
        "repaymentTerm": {"min": 12, "max": 60},
        "processingFee": "0%",
        "collateral": False,
        "eligibility": {
            "minAge": 18,
            "maxAge": 65,
            "minIncome": 0,
            "creditScoreMin": 0,
            "organizationType": ["startup", "individual", "sme"],
            "businessAge": 0,
            "sector": ["all"]
        },
        "description": "Collateral-free micro loans for first-time entrepreneurs and small businesses.",
        "benefits": ["No collateral required", "No processing fee", "Mudra card for working capital"],
        "features": ["Micro enterprise support", "Flexible repayment"],
        "documents": ["Aadhaar Card", "PAN Card", "Business plan", "Address proof"],
        "processingTime": "7-10 days",
        "applicationUrl": "https://www.mudra.org.in/"
    },
    {
        "id": "in-standup-india",
        "name": "Stand-Up India Scheme",
        "lender": "SIDBI",
        "lenderType": "government",
        "category": "startup",
        "country": "India",
        "interestRate": "9-11%",
        "loanAmount": {"min": 1000000, "max": 10000000},
        "repaymentTerm": {"min": 12, "max": 84},
        "processingFee": "0.5%",
        "collateral": True,
        "eligibility": {
            "minAge": 18,
            "maxAge": 60,
            "minIncome": 200000,
            "creditScoreMin": 650,
            "organizationType": ["startup", "sme"],
            "businessAge": 0,
            "sector": ["manufacturing", "services", "retail", "agriculture"]
        },
        "description": "Bank loans for greenfield enterprises set up by SC/ST and women entrepreneurs.",
        "benefits": ["Composite loan for term and working capital", "Credit guarantee cover"],
        "features": ["Greenfield projects", "Handholding support"],
        "documents": ["Project report", "Identity proof", "Caste certificate (if applicable)"],
        "processingTime": "2-4 weeks",
        "applicationUrl": "https://www.standupmitra.in/"
    },
    {
        "id": "in-sbi-sme-smart-score",
        "name": "SBI SME Smart Score",
        "lender": "State Bank of India",
        "lenderType": "bank",
        "category": "sme",
        "country": "India",
        "interestRate": "10.5-14%",
        "loanAmount": {"min": 1000000, "max": 5000000},
        "repaymentTerm": {"min": 12, "max": 60},
        "processingFee": "1%",
        "collateral": False,
        "eligibility": {
            "minAge": 21,
            "maxAge": 65,
            "minIncome": 500000,
            "creditScoreMin": 700,
            "organizationType": ["sme"],
            "businessAge": 24,
            "sector": ["manufacturing", "services", "technology", "retail"]
        },
        "description": "Score-based working capital and term loans for micro and small enterprises.",
        "benefits": ["Quick sanction", "Collateral-free up to limit"],
        "features": ["Working capital", "Term loan", "Score-based approval"],
        "documents": ["GST returns", "ITR (2 years)", "Bank statement (12 months)"],
        "processingTime": "10-15 days",
        "applicationUrl": "https://sbi.co.in/web/sme"
    },
    {
        "id": "in-lendingkart-working-capital",
        "name": "Lendingkart Working Capital Loan",
        "lender": "Lendingkart",
        "lenderType": "fintech",
        "category": "sme",
        "country": "India",
        "interestRate": "15-27%",
        "loanAmount": {"min": 50000, "max": 20000000},
        "repaymentTerm": {"min": 1, "max": 36},
        "processingFee": "2-3%",
        "collateral": False,
        "eligibility": {
            "minAge": 21,
            "maxAge": 65,
            "minIncome": 1000000,
            "creditScoreMin": 650,
            "organizationType": ["sme", "startup"],
            "businessAge": 6,
            "sector": ["all"]
        },
        "description": "Unsecured online working capital loans with paperless processing.",
        "benefits": ["Fully online", "No collateral", "Disbursal within 72 hours"],
        "features": ["Digital application", "Short tenure options"],
        "documents": ["Bank statement (6 months)", "KYC documents", "GST registration"],
        "processingTime": "72 hours",
        "applicationUrl": "https://www.lendingkart.com/"
    },
    {
        "id": "in-bajaj-business-loan",
        "name": "Bajaj Finserv Business Loan",
        "lender": "Bajaj Finance",
        "lenderType": "nbfc",
        "category": "sme",
        "country": "India",
        "interestRate": "14-30%",
        "loanAmount": {"min": 100000, "max": 8000000},
        "repaymentTerm": {"min": 12, "max": 96},
        "processingFee": "3.54%",
        "collateral": False,
        "eligibility": {
            "minAge": 24,
            "maxAge": 72,
            "minIncome": 600000,
            "creditScoreMin": 685,
            "organizationType": ["sme", "individual"],
            "businessAge": 36,
            "sector": ["all"]
        },
        "description": "Unsecured business loans for expansion, inventory and equipment.",
        "benefits": ["Flexi loan facility", "Part prepayment allowed"],
        "features": ["Flexi withdrawal", "Interest-only EMIs"],
        "documents": ["KYC documents", "Business proof", "Bank statement (6 months)"],
        "processingTime": "48 hours",
        "applicationUrl": "https://www.bajajfinserv.in/business-loan"
    },
    {
        "id": "in-nabard-kcc",
        "name": "Kisan Credit Card",
        "lender": "NABARD",
        "lenderType": "government",
        "category": "agriculture",
        "country": "India",
        "interestRate": "7%",
        "loanAmount": {"min": 10000, "max": 300000},
        "repaymentTerm": {"min": 12, "max": 60},
        "processingFee": "0%",
        "collateral": False,
        "eligibility": {
            "minAge": 18,
            "maxAge": 75,
            "minIncome": 0,
            "creditScoreMin": 0,
            "organizationType": ["farmer", "cooperative"],
            "businessAge": 0,
            "sector": ["agriculture"]
        },
        "description": "Short-term crop credit for farmers with interest subvention on prompt repayment.",
        "benefits": ["Interest subvention", "Crop insurance coverage"],
        "features": ["Revolving credit", "ATM enabled card"],
        "documents": ["Land records", "Identity proof", "Address proof"],
        "processingTime": "2 weeks",
        "applicationUrl": "https://www.nabard.org/"
    },
    {
        "id": "in-vidya-lakshmi",
        "name": "Vidya Lakshmi Education Loan",
        "lender": "Vidya Lakshmi Portal",
        "lenderType": "government",
        "category": "education",
        "country": "India",
        "interestRate": "8-11%",
        "loanAmount": {"min": 100000, "max": 2000000},
        "repaymentTerm": {"min": 60, "max": 180},
        "processingFee": "0-1%",
        "collateral": False,
        "eligibility": {
            "minAge": 16,
            "maxAge": 35,
            "minIncome": 0,
            "creditScoreMin": 0,
            "organizationType": ["individual", "institution"],
            "businessAge": 0,
            "sector": ["education"]
        },
        "description": "Single window for education loans from multiple banks with interest subsidy.",
        "benefits": ["Moratorium during course", "Interest subsidy for EWS"],
        "features": ["Multiple bank applications", "Scholarship links"],
        "documents": ["Admission letter", "Fee structure", "Academic records", "Co-applicant income proof"],
        "processingTime": "15-30 days",
        "applicationUrl": "https://www.vidyalakshmi.co.in/"
    },
    {
        "id": "in-hdfc-home-loan",
        "name": "HDFC Home Loan",
        "lender": "HDFC Bank",
        "lenderType": "bank",
        "category": "home",
        "country": "India",
        "interestRate": "8.75-9.65%",
        "loanAmount": {"min": 500000, "max": 100000000},
        "repaymentTerm": {"min": 60, "max": 360},
        "processingFee": "0.5%",
        "collateral": True,
        "eligibility": {
            "minAge": 21,
            "maxAge": 65,
            "minIncome": 300000,
            "creditScoreMin": 700,
            "organizationType": ["individual"],
            "businessAge": 0,
            "sector": ["all"]
        },
        "description": "Long-term secured loans for purchase or construction of residential property.",
        "benefits": ["PMAY subsidy eligible", "Balance transfer facility"],
        "features": ["Long tenure", "Step-up repayment"],
        "documents": ["Salary slips (6 months)", "ITR (3 years)", "Property documents"],
        "processingTime": "2-3 weeks",
        "applicationUrl": "https://www.hdfcbank.com/personal/borrow/popular-loans/home-loan"
    },
    {
        "id": "in-tata-trusts-ngo-grant",
        "name": "Tata Trusts NGO Grant",
        "lender": "Tata Trusts",
        "lenderType": "private",
        "category": "ngo",
        "country": "India",
        "interestRate": "0%",
        "loanAmount": {"min": 100000, "max": 5000000},
        "repaymentTerm": {"min": 0, "max": 0},
        "processingFee": "0%",
        "collateral": False,
        "eligibility": {
            "minAge": 18,
            "maxAge": 100,
            "minIncome": 0,
            "creditScoreMin": 0,
            "organizationType": ["ngo"],
            "businessAge": 36,
            "sector": ["social", "education", "healthcare"]
        },
        "description": "Programme grants for registered non-profits working on health, education and livelihoods.",
        "benefits": ["Non-repayable grant", "Capacity building support"],
        "features": ["Multi-year funding", "Programme monitoring"],
        "documents": ["12A and 80G certificates", "Audited financials (3 years)", "Project proposal"],
        "processingTime": "2-3 months",
        "applicationUrl": "https://www.tatatrusts.org/"
    },
    {
        "id": "us-sba-7a",
        "name": "SBA 7(a) Loan",
        "lender": "U.S. Small Business Administration",
        "lenderType": "government",
        "category": "sme",
        "country": "United States",
        "interestRate": "11.5-15%",
        "loanAmount": {"min": 50000, "max": 5000000},
        "repaymentTerm": {"min": 60, "max": 300},
        "processingFee": "2-3.75%",
        "collateral": True,
        "eligibility": {
            "minAge": 18,
            "maxAge": 100,
            "minIncome": 50000,
            "creditScoreMin": 680,
            "organizationType": ["sme", "startup"],
            "businessAge": 24,
            "sector": ["all"]
        },
        "description": "Government-guaranteed loans for working capital, equipment and real estate.",
        "benefits": ["Long repayment terms", "Partial government guarantee"],
        "features": ["Working capital", "Equipment finance", "Real estate purchase"],
        "documents": ["Business tax returns", "Personal financial statement", "Business plan"],
        "processingTime": "30-90 days",
        "applicationUrl": "https://www.sba.gov/funding-programs/loans/7a-loans"
    }
]

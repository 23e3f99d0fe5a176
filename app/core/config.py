import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class Settings:
    PROJECT_NAME: str = "Loan Comparison API"
    MONGODB_URI: str = os.getenv("MONGODB_URI")
    MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "loan_management")
    CLIENT_URL: str = os.getenv("CLIENT_URL", "http://localhost:3000")
    # Optional JSON file that replaces the built-in loan catalog
    LOAN_CATALOG_PATH: str = os.getenv("LOAN_CATALOG_PATH")
    COMPARISON_LIMIT: int = _int_env("COMPARISON_LIMIT", 4)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()

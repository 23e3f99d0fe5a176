from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.requests import Request
from app.api.loan_routes import router as loan_router
from app.api.tracking_routes import router as tracking_router
from app.api.organization_routes import router as organization_router
from app.api.session_routes import router as session_router
from contextlib import asynccontextmanager
from app.database.connection import init_db, check_db_health
from app.core.config import settings
from app.services.loan_catalog_service import loan_catalog_service
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException
from fastapi.responses import JSONResponse
import logging
import traceback


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds security headers to every non-OPTIONS response.

    OPTIONS requests are left to CORSMiddleware, which is registered last so
    it runs first and can answer preflight requests itself.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        if request.method != "OPTIONS":
            response.headers["X-Content-Type-Options"] = "nosniff"
            response.headers["X-Frame-Options"] = "DENY"
            response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
            response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Search, compare and check eligibility for loan products; track click-throughs to lenders",
    version="2.0.0",
    lifespan=lifespan
)


# Global exception handlers to return structured JSON and log tracebacks
logger = logging.getLogger("server_exception_handler")


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    body = {
        "error": {
            "code": exc.status_code,
            "message": str(exc.detail) if exc.detail else exc.status_code,
            "status_code": exc.status_code
        }
    }
    logger.warning(f"HTTPException handled: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Validation errors from FastAPI/Pydantic
    body = {
        "error": {
            "code": "validation_error",
            "message": "Request validation failed",
            "details": jsonable_errors(exc)
        }
    }
    logger.warning(f"Validation error: {exc.errors()}")
    return JSONResponse(status_code=422, content=body)


def jsonable_errors(exc: RequestValidationError):
    # ctx may carry the raw exception object, which is not JSON serializable
    return [
        {key: (str(value) if key == "ctx" else value) for key, value in error.items()}
        for error in exc.errors()
    ]


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(exc)}\n{tb}")
    body = {
        "error": {
            "code": "internal_server_error",
            "message": "An unexpected error occurred",
        }
    }
    return JSONResponse(status_code=500, content=body)

# Support comma-separated CLIENT_URL values (e.g. "http://localhost:3000,http://localhost:3001")
raw_origins = settings.CLIENT_URL or ""
allowed_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

if not allowed_origins or any("localhost" in origin for origin in allowed_origins):
    allowed_origins = sorted(set(allowed_origins + ["http://localhost:3000", "http://localhost:3001"]))

# Middleware runs LIFO: SecurityHeadersMiddleware first so CORSMiddleware executes first
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=[
        "Content-Type",
        "Authorization",
        "Accept",
        "Origin",
        "Accept-Language",
        "Content-Language",
        "X-Requested-With",
        "Cache-Control",
        "If-Modified-Since",
        "If-None-Match",
        "Pragma",
    ],
    expose_headers=["Content-Type"],
    max_age=3600,
)

# Include routers
app.include_router(loan_router)
app.include_router(tracking_router)
app.include_router(organization_router)
app.include_router(session_router)

@app.get("/")
async def root():
    return {"message": "Loan Comparison API is running!"}

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "message": "API is running",
        "database": await check_db_health(),
        "catalog": loan_catalog_service.get_service_status() if loan_catalog_service else {"status": "unavailable"},
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)

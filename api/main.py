"""
branchseed API

Serves deterministic sample branch data to the loan dashboard.

Endpoints:
    GET /health                                  - Liveness probe
    GET /api                                     - Service info
    GET /branches/{branch_id}/sample             - Sample bundle (JSON)
    GET /branches/{branch_id}/statistics         - Statistic cards only
    GET /branches/{branch_id}/sample/{table}.csv - One bundle table as CSV
"""

import json
import logging
import os
import sys
import uuid
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from pathlib import Path

# Add src directory to path for branchseed imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from branchseed import __version__
from branchseed.exceptions import BranchSeedError, UnknownTableError
from branchseed.pools import default_pools, load_pools

from api.routes import branches
from api.schemas.responses import ErrorResponse, HealthResponse

# =============================================================================
# Configuration
# =============================================================================

BS_LOG_LEVEL = os.getenv("BS_LOG_LEVEL", "INFO")
BS_DOCS_ENABLED = os.getenv("BS_DOCS_ENABLED", "true").lower() == "true"
BS_POOLS_FILE = os.getenv("BS_POOLS_FILE")
BS_FIXED_NOW = os.getenv("BS_FIXED_NOW")
BS_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("BS_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    EXTRA_FIELDS = ("request_id", "branch_id", "officer_count", "duration_ms")

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in self.EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        return json.dumps(log_entry)


logger = logging.getLogger("branchseed")
logger.setLevel(getattr(logging, BS_LOG_LEVEL.upper()))
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

# =============================================================================
# Pools and pinned date
# =============================================================================

POOLS = load_pools(BS_POOLS_FILE) if BS_POOLS_FILE else default_pools()
FIXED_NOW = date.fromisoformat(BS_FIXED_NOW) if BS_FIXED_NOW else None

branches.set_config(POOLS, FIXED_NOW)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup info."""
    logger.info("branchseed starting", extra={"request_id": "startup"})
    logger.info(f"Version: {__version__}")
    logger.info(f"Pools: {POOLS.sizes()}")
    logger.info(f"Fixed now: {FIXED_NOW.isoformat() if FIXED_NOW else 'wall clock'}")
    logger.info(f"Docs enabled: {BS_DOCS_ENABLED}")

    yield

    logger.info("Shutting down...")


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title="branchseed",
    description="Deterministic sample branch data for the loan dashboard",
    version=__version__,
    docs_url="/docs" if BS_DOCS_ENABLED else None,
    redoc_url="/redoc" if BS_DOCS_ENABLED else None,
    openapi_url="/openapi.json" if BS_DOCS_ENABLED else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=BS_CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(branches.router)

# =============================================================================
# Middleware and error handling
# =============================================================================

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(BranchSeedError)
async def branchseed_error_handler(request: Request, exc: BranchSeedError):
    """Map domain errors to structured JSON responses."""
    request_id = getattr(request.state, "request_id", "unknown")
    status_code = 404 if isinstance(exc, UnknownTableError) else 500
    if status_code == 500:
        logger.error(str(exc), extra={"request_id": request_id})
    body = exc.to_dict()
    error = ErrorResponse(
        error=body["message"],
        code=body["code"],
        details=body.get("details"),
        request_id=request_id,
    )
    return JSONResponse(status_code=status_code, content=error.model_dump())

# =============================================================================
# Health Endpoints
# =============================================================================

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health():
    """Liveness probe."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        pool_sizes=POOLS.sizes(),
    )


@app.get("/api", tags=["Health"])
async def api_info():
    """Service info endpoint."""
    return {
        "service": "branchseed",
        "version": __version__,
        "status": "running",
        "fixed_now": FIXED_NOW.isoformat() if FIXED_NOW else None,
        "endpoints": {
            "sample": "GET /branches/{branch_id}/sample - Sample bundle",
            "statistics": "GET /branches/{branch_id}/statistics - Statistic cards",
            "export": "GET /branches/{branch_id}/sample/{table}.csv - CSV table",
            "docs": "GET /docs - API documentation",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

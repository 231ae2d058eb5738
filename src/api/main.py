"""
FastAPI Application — Identity Reconciliation Service.

Architecture:
  - Stateless relay to the verification provider (Jumio Netverify v4)
  - Reconciliation engine comparing registration vs extracted document
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from src.api.routes.verify import router as verify_router, _get_use_case
from src.api.schemas.responses import HealthResponse
from src.config.settings import get_settings
from src.core.exceptions import BadRequestError, VerificationError
from src.infrastructure.jumio.factory import UnconfiguredProvider

VERSION = "1.0.0"

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ── Startup ──
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the relay once so missing credentials show up in the logs immediately."""
    _get_use_case()
    logger.info("Identity Reconciliation Service started")
    yield


app = FastAPI(
    title="Identity Reconciliation Service",
    description="Relay to an identity-verification provider and registration vs document matching.",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Errors ──
@app.exception_handler(VerificationError)
async def verification_error_handler(request: Request, exc: VerificationError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed parameters are bad requests, rendered like every other error."""
    problems = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    ]
    error = BadRequestError(f"Invalid request: {'; '.join(problems)}")
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


app.include_router(verify_router, tags=["Verification"])


# ── Health ──
@app.get("/health", response_model=HealthResponse)
async def health():
    provider = _get_use_case().provider
    return HealthResponse(
        status="ok",
        version=VERSION,
        relay_configured=not isinstance(provider, UnconfiguredProvider),
    )


@app.get("/", response_class=HTMLResponse)
async def serve_ui():
    return HTMLResponse(
        "<h1>Identity Reconciliation Service</h1><p>Go to <a href='/docs'>/docs</a></p>"
    )


# ── Local Dev Entry ──
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)

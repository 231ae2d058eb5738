"""
Routes: /verify — relay to the verification provider + reconciliation.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.api.schemas.requests import ReconcileRequest, StartSessionRequest
from src.api.schemas.responses import ErrorResponse, MatchReportResponse
from src.config.settings import get_settings
from src.core.exceptions import BadRequestError, VerificationError
from src.core.use_cases.verify_identity import VerifyIdentityUseCase
from src.infrastructure.jumio.factory import build_provider
from src.infrastructure.rules.identity_rules import IdentityReconciliationEngine

router = APIRouter()

# Lazy singleton
_use_case = None


def _get_use_case() -> VerifyIdentityUseCase:
    """Factory — build use case with concrete adapters."""
    global _use_case
    if _use_case is None:
        settings = get_settings()
        _use_case = VerifyIdentityUseCase(
            provider=build_provider(settings),
            engine=IdentityReconciliationEngine(
                name_threshold=settings.name_threshold,
                address_threshold=settings.address_threshold,
                city_threshold=settings.city_threshold,
                accepted_documents=settings.accepted_documents,
            ),
        )
    return _use_case


@router.post("/verify/session", responses={500: {"model": ErrorResponse}})
async def start_session(body: StartSessionRequest | None = None):
    """
    Start a provider verification session.

    Returns the provider's initiation payload unchanged, including
    ``transactionReference`` and ``authorizationToken`` for the capture widget.
    """
    reference = body.reference if body else None
    try:
        session = _get_use_case().start(reference)
    except VerificationError as e:
        return JSONResponse(status_code=500, content={"error": e.message})
    return session.raw


@router.get(
    "/verify/session",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def fetch_session(reference: str | None = None):
    """Return the provider's extraction payload for a completed session."""
    if not reference or not reference.strip():
        raise BadRequestError("Missing reference")
    return _get_use_case().fetch(reference)


@router.post(
    "/verify/reconcile",
    response_model=MatchReportResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def reconcile(body: ReconcileRequest):
    """
    Compare a registration against a document.

    Either pass ``reference`` to fetch the session's payload from the
    provider, or ``payload`` to reconcile one fetched earlier.
    """
    registration = body.registration.to_record()
    use_case = _get_use_case()
    if body.payload is not None:
        report = use_case.reconcile_payload(registration, body.payload)
    elif body.reference:
        report = use_case.reconcile_session(registration, body.reference)
    else:
        raise BadRequestError("Either reference or payload is required")
    return MatchReportResponse.from_report(report)

"""
Use Case: Verify Identity.

Relay start/fetch through the provider port, then reconcile the
extraction payload against the applicant's registration.
"""

import logging

from src.core.entities.document import DocumentRecord
from src.core.entities.match_report import MatchReport
from src.core.entities.registration import RegistrationRecord
from src.core.interfaces.reconciliation_engine import IReconciliationEngine
from src.core.interfaces.verification_provider import IVerificationProvider, SessionStart

logger = logging.getLogger(__name__)


class VerifyIdentityUseCase:
    """
    Stateless orchestration over a provider and a reconciliation engine.

    Dependency Injection: both collaborators come in through the
    constructor so tests can swap them.
    """

    def __init__(self, provider: IVerificationProvider, engine: IReconciliationEngine):
        self._provider = provider
        self._engine = engine

    @property
    def provider(self) -> IVerificationProvider:
        return self._provider

    def start(self, user_reference: str | None = None) -> SessionStart:
        return self._provider.start_session(user_reference)

    def fetch(self, session_id: str) -> dict:
        return self._provider.fetch_result(session_id)

    def reconcile_payload(self, registration: RegistrationRecord, payload) -> MatchReport:
        """Reconcile an already-fetched extraction payload."""
        document = DocumentRecord.from_payload(payload)
        report = self._engine.reconcile(registration, document)
        logger.info(
            f"Reconciliation {'passed' if report.passed else 'failed'}"
            f" (mismatches: {', '.join(report.failed_fields) or 'none'})"
        )
        return report

    def reconcile_session(self, registration: RegistrationRecord, session_id: str) -> MatchReport:
        """Fetch a completed session's payload and reconcile it."""
        return self.reconcile_payload(registration, self.fetch(session_id))

"""
Use Case: Verification Flow.

Drives the applicant wizard. The capture widget reports back through
``on_success`` / ``on_error``; everything else is plain method calls.
"""

import logging

from src.core.entities.match_report import MatchReport
from src.core.entities.registration import RegistrationRecord
from src.core.entities.wizard import InvalidTransitionError, Wizard, WizardStep
from src.core.exceptions import VerificationError
from src.core.interfaces.capture_listener import ICaptureListener
from src.core.interfaces.verification_provider import SessionStart
from src.core.use_cases.verify_identity import VerifyIdentityUseCase

logger = logging.getLogger(__name__)

CONNECT_FAILED = "Could not connect to the verification backend."
CAPTURE_CANCELLED = "Verification cancelled."
RESULTS_FAILED = "Failed to retrieve verification results."


class VerificationFlow(ICaptureListener):
    """One applicant's pass through the wizard."""

    def __init__(self, use_case: VerifyIdentityUseCase, user_reference: str | None = None):
        self._use_case = use_case
        self._wizard = Wizard()
        self.user_reference = user_reference
        self.registration: RegistrationRecord | None = None
        self.session: SessionStart | None = None
        self.report: MatchReport | None = None
        self.error: str | None = None
        self.loading = False

    @property
    def step(self) -> WizardStep:
        return self._wizard.step

    def submit_registration(self, registration: RegistrationRecord) -> None:
        """Register -> AutomatedCheckFailed."""
        registration.validate()
        self._wizard.advance(WizardStep.AUTOMATED_CHECK_FAILED)
        self.registration = registration
        logger.debug("Registration submitted")

    def start_capture(self) -> SessionStart | None:
        """AutomatedCheckFailed -> CaptureInProgress, then open a provider session."""
        self._wizard.advance(WizardStep.CAPTURE_IN_PROGRESS)
        self.loading = True
        self.error = None
        try:
            self.session = self._use_case.start(self.user_reference)
        except VerificationError as e:
            logger.error(f"Could not start verification session: {e}")
            self.error = CONNECT_FAILED
            self.loading = False
            return None
        return self.session

    # ── ICaptureListener ─────────────────────────────────────────────

    def on_success(self, session_id: str) -> None:
        if not self._wizard.can_advance(WizardStep.RESULTS):
            raise InvalidTransitionError(f"No capture in progress (step {self.step.value})")
        try:
            self.report = self._use_case.reconcile_session(self.registration, session_id)
            self._wizard.advance(WizardStep.RESULTS)
        except VerificationError as e:
            logger.error(f"Could not retrieve results for {session_id}: {e}")
            self.error = RESULTS_FAILED
        finally:
            self.loading = False

    def on_error(self, reason: str) -> None:
        logger.warning(f"Capture failed: {reason}")
        self.error = CAPTURE_CANCELLED
        self.loading = False

    def restart(self) -> None:
        """Start again from an empty Register step."""
        self._wizard.restart()
        self.registration = None
        self.session = None
        self.report = None
        self.error = None
        self.loading = False

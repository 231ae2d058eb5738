"""
Entity: Verification Wizard

Linear step machine behind the applicant UI:
Register -> AutomatedCheckFailed -> CaptureInProgress -> Results.
"""

from enum import Enum

from src.core.exceptions import VerificationError


class WizardStep(str, Enum):
    REGISTER = "REGISTER"
    AUTOMATED_CHECK_FAILED = "AUTOMATED_CHECK_FAILED"
    CAPTURE_IN_PROGRESS = "CAPTURE_IN_PROGRESS"
    RESULTS = "RESULTS"


TRANSITIONS: dict[WizardStep, set[WizardStep]] = {
    WizardStep.REGISTER: {WizardStep.AUTOMATED_CHECK_FAILED},
    WizardStep.AUTOMATED_CHECK_FAILED: {WizardStep.CAPTURE_IN_PROGRESS},
    WizardStep.CAPTURE_IN_PROGRESS: {WizardStep.RESULTS},
    WizardStep.RESULTS: set(),
}


class InvalidTransitionError(VerificationError):
    """Step change not allowed from the current step."""
    status_code = 409


class Wizard:
    """Holds the current step and enforces the allowed transitions."""

    def __init__(self, step: WizardStep = WizardStep.REGISTER):
        self._step = step

    @property
    def step(self) -> WizardStep:
        return self._step

    def can_advance(self, target: WizardStep) -> bool:
        return target in TRANSITIONS[self._step]

    def advance(self, target: WizardStep) -> WizardStep:
        if not self.can_advance(target):
            raise InvalidTransitionError(
                f"Cannot move from {self._step.value} to {target.value}"
            )
        self._step = target
        return self._step

    def restart(self) -> WizardStep:
        """Back to the first step. Allowed from anywhere."""
        self._step = WizardStep.REGISTER
        return self._step

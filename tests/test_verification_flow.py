"""
Unit tests for the wizard state machine and the capture-driven flow.
"""

import pytest

from conftest import make_payload, make_registration
from src.core.entities.wizard import InvalidTransitionError, Wizard, WizardStep
from src.core.exceptions import BadRequestError, UpstreamError
from src.core.use_cases.verification_flow import (
    CAPTURE_CANCELLED,
    CONNECT_FAILED,
    RESULTS_FAILED,
    VerificationFlow,
)


@pytest.fixture
def flow(use_case):
    return VerificationFlow(use_case, user_reference="user_test_01")


class TestWizard:
    """Tests for the step machine on its own."""

    def test_linear_path(self):
        """Test the only forward path through the steps."""
        wizard = Wizard()
        for step in (
            WizardStep.AUTOMATED_CHECK_FAILED,
            WizardStep.CAPTURE_IN_PROGRESS,
            WizardStep.RESULTS,
        ):
            assert wizard.advance(step) is step

    @pytest.mark.parametrize(
        "start, target",
        [
            (WizardStep.REGISTER, WizardStep.CAPTURE_IN_PROGRESS),
            (WizardStep.REGISTER, WizardStep.RESULTS),
            (WizardStep.AUTOMATED_CHECK_FAILED, WizardStep.REGISTER),
            (WizardStep.RESULTS, WizardStep.CAPTURE_IN_PROGRESS),
        ],
    )
    def test_skipping_rejected(self, start, target):
        """Test steps cannot be skipped or walked backwards."""
        wizard = Wizard(start)
        with pytest.raises(InvalidTransitionError):
            wizard.advance(target)
        assert wizard.step is start

    @pytest.mark.parametrize("start", list(WizardStep))
    def test_restart_from_anywhere(self, start):
        """Test restart always lands on Register."""
        assert Wizard(start).restart() is WizardStep.REGISTER


class TestVerificationFlow:
    """Tests for the flow reacting to capture callbacks."""

    def test_happy_path(self, flow, provider):
        """Test register, capture, success -> a passing report."""
        flow.submit_registration(make_registration())
        assert flow.step is WizardStep.AUTOMATED_CHECK_FAILED

        session = flow.start_capture()
        assert flow.step is WizardStep.CAPTURE_IN_PROGRESS
        assert flow.loading is True
        assert session.session_id == "txn-123"
        assert provider.started == ["user_test_01"]

        flow.on_success(session.session_id)
        assert flow.step is WizardStep.RESULTS
        assert flow.report.passed is True
        assert flow.loading is False
        assert flow.error is None
        assert provider.fetched == ["txn-123"]

    def test_failing_report_still_reaches_results(self, flow, provider):
        """Test a mismatch is a result, not an error."""
        provider.payload = make_payload(lastName="Smyth")
        flow.submit_registration(make_registration())
        flow.start_capture()
        flow.on_success("txn-123")
        assert flow.step is WizardStep.RESULTS
        assert flow.report.passed is False

    def test_incomplete_registration(self, flow):
        """Test the Register step is not left without an address."""
        with pytest.raises(BadRequestError):
            flow.submit_registration(make_registration(street=""))
        assert flow.step is WizardStep.REGISTER

    def test_capture_before_registration(self, flow):
        """Test capture cannot start from Register."""
        with pytest.raises(InvalidTransitionError):
            flow.start_capture()

    def test_start_failure(self, flow, provider):
        """Test a failed session start shows a connection error."""
        provider.start_error = UpstreamError("down")
        flow.submit_registration(make_registration())
        assert flow.start_capture() is None
        assert flow.error == CONNECT_FAILED
        assert flow.loading is False
        assert flow.step is WizardStep.CAPTURE_IN_PROGRESS

    def test_capture_cancelled(self, flow):
        """Test the widget's error callback."""
        flow.submit_registration(make_registration())
        flow.start_capture()
        flow.on_error("user closed the widget")
        assert flow.error == CAPTURE_CANCELLED
        assert flow.loading is False
        assert flow.step is WizardStep.CAPTURE_IN_PROGRESS

    def test_fetch_failure(self, flow, provider):
        """Test a failed result fetch keeps the applicant on the capture step."""
        provider.fetch_error = UpstreamError("down", status_code=502)
        flow.submit_registration(make_registration())
        flow.start_capture()
        flow.on_success("txn-123")
        assert flow.error == RESULTS_FAILED
        assert flow.report is None
        assert flow.step is WizardStep.CAPTURE_IN_PROGRESS

    def test_success_without_capture(self, flow, provider):
        """Test a stray success callback is rejected."""
        with pytest.raises(InvalidTransitionError):
            flow.on_success("txn-123")
        assert provider.fetched == []

    def test_restart(self, flow):
        """Test start again clears everything."""
        flow.submit_registration(make_registration())
        flow.start_capture()
        flow.on_success("txn-123")
        flow.restart()
        assert flow.step is WizardStep.REGISTER
        assert flow.registration is None
        assert flow.report is None

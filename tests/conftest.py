"""
Pytest configuration and shared fixtures.

Provides:
- Registration / provider payload builders that agree with each other
- A fake verification provider recording its calls
- A TestClient whose relay is the fake provider
"""

import os
from datetime import date

import pytest

# Keep a developer's .env credentials out of the tests
os.environ.setdefault("JUMIO_TOKEN", "")
os.environ.setdefault("JUMIO_SECRET", "")

from src.core.entities.registration import RegistrationRecord
from src.core.interfaces.verification_provider import IVerificationProvider, SessionStart
from src.core.use_cases.verify_identity import VerifyIdentityUseCase
from src.infrastructure.rules.identity_rules import IdentityReconciliationEngine


def make_registration(**overrides) -> RegistrationRecord:
    fields = {
        "first_name": "John",
        "last_name": "Smith",
        "date_of_birth": date(1990, 1, 1),
        "house_number": "10",
        "street": "Downing Street",
        "postcode": "SW1A 2AA",
        "city": "London",
        "flat": None,
    }
    fields.update(overrides)
    return RegistrationRecord(**fields)


def make_payload(**overrides) -> dict:
    """Provider transaction payload matching ``make_registration()``."""
    document = {
        "firstName": "John",
        "lastName": "Smith",
        "dob": "1990-01-01",
        "type": "DRIVING_LICENSE",
        "issuingCountry": "GBR",
    }
    address = {
        "postalCode": "SW1A 2AA",
        "line1": "10 Downing Street",
        "city": "London",
    }
    for key, value in overrides.items():
        if key in address:
            address[key] = value
        else:
            document[key] = value
    document["address"] = address
    return {"transaction": {"status": "DONE"}, "document": document}


class FakeProvider(IVerificationProvider):
    """In-memory provider. Set ``start_error`` / ``fetch_error`` to fail calls."""

    def __init__(self, payload=None):
        self.payload = payload if payload is not None else make_payload()
        self.start_error = None
        self.fetch_error = None
        self.started = []
        self.fetched = []

    def start_session(self, user_reference=None) -> SessionStart:
        self.started.append(user_reference)
        if self.start_error:
            raise self.start_error
        raw = {
            "timestamp": "2026-10-17T10:00:00.000Z",
            "transactionReference": "txn-123",
            "redirectUrl": "https://lon.netverify.com/widget/jumio-app/txn-123",
            "authorizationToken": "auth-token",
        }
        return SessionStart(session_id="txn-123", authorization_token="auth-token", raw=raw)

    def fetch_result(self, session_id: str) -> dict:
        self.fetched.append(session_id)
        if self.fetch_error:
            raise self.fetch_error
        return self.payload


@pytest.fixture
def registration() -> RegistrationRecord:
    return make_registration()


@pytest.fixture
def engine() -> IdentityReconciliationEngine:
    return IdentityReconciliationEngine()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def use_case(provider, engine) -> VerifyIdentityUseCase:
    return VerifyIdentityUseCase(provider=provider, engine=engine)


@pytest.fixture
def client(monkeypatch, use_case):
    """API client with the relay swapped for the fake provider."""
    from fastapi.testclient import TestClient

    from src.api import main
    from src.api.routes import verify

    monkeypatch.setattr(verify, "_use_case", use_case)
    return TestClient(main.app)

"""
Contract: Verification Provider

Starts capture sessions at the external identity-verification provider
and fetches what it extracted. Implementations hold the credentials;
callers never see them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class SessionStart:
    """Provider answer to a session initiation."""
    session_id: str               # provider transaction reference
    authorization_token: str      # handed to the client-side capture widget
    raw: dict = field(default_factory=dict)


class IVerificationProvider(ABC):
    """
    Port: Verification Provider

    Each call is independent. The session id is the only correlation key.
    """

    @abstractmethod
    def start_session(self, user_reference: str | None = None) -> SessionStart:
        """
        Initiate a provider-side verification workflow.

        Raises:
            ConfigurationError: credentials absent.
            UpstreamError: provider call failed.
        """
        ...

    @abstractmethod
    def fetch_result(self, session_id: str) -> dict:
        """
        Retrieve the extraction payload of a completed session.

        Raises:
            NotFoundError: session reference missing or unknown.
            UpstreamError: provider call failed.
        """
        ...

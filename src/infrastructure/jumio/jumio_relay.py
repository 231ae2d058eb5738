"""
Jumio Relay — credential-injecting forwarder to Jumio Netverify v4.

Two pass-through operations:
  - POST {base_url}/initiate                   start a capture session
  - GET  {base_url}/transactions/{reference}  fetch extracted results

Single attempt per call. No caching, no session tracking.
"""
import logging
import uuid
from dataclasses import dataclass
from urllib.parse import quote

import requests
from requests.auth import HTTPBasicAuth

from src.config.settings import Settings
from src.core.exceptions import ConfigurationError, NotFoundError, UpstreamError
from src.core.interfaces.verification_provider import IVerificationProvider, SessionStart

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayConfig:
    """Provider credentials and endpoints, fixed at startup."""
    token: str
    secret: str
    base_url: str = "https://netverify.com/api/v4"
    user_agent: str = "identity-reconciliation-relay"
    success_url: str = "https://example.com/success"
    error_url: str = "https://example.com/error"
    default_user_reference: str = "guest_user"
    timeout: float | None = None

    def __repr__(self) -> str:
        return f"RelayConfig(base_url={self.base_url!r}, token=***)"

    @classmethod
    def from_settings(cls, settings: Settings) -> "RelayConfig":
        if not settings.jumio_token or not settings.jumio_secret:
            raise ConfigurationError("Missing verification provider API keys")
        return cls(
            token=settings.jumio_token,
            secret=settings.jumio_secret,
            base_url=settings.jumio_base_url.rstrip("/"),
            user_agent=settings.jumio_user_agent,
            success_url=settings.jumio_success_url,
            error_url=settings.jumio_error_url,
            default_user_reference=settings.default_user_reference,
            timeout=settings.request_timeout,
        )


class JumioRelay(IVerificationProvider):
    """Jumio implementation of the verification provider port."""

    def __init__(self, config: RelayConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()
        self._auth = HTTPBasicAuth(config.token, config.secret)

    def start_session(self, user_reference: str | None = None) -> SessionStart:
        body = {
            "customerInternalReference": str(uuid.uuid4()),
            "userReference": user_reference or self.config.default_user_reference,
            "successUrl": self.config.success_url,
            "errorUrl": self.config.error_url,
        }
        data = self._request(
            "POST",
            f"{self.config.base_url}/initiate",
            json=body,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": self.config.user_agent,
            },
        )

        session_id = data.get("transactionReference")
        token = data.get("authorizationToken")
        if not session_id or not token:
            raise UpstreamError("Provider response missing transactionReference or authorizationToken")

        logger.info(f"Started verification session {session_id}")
        return SessionStart(session_id=session_id, authorization_token=token, raw=data)

    def fetch_result(self, session_id: str) -> dict:
        reference = (session_id or "").strip()
        if not reference or reference in (".", ".."):
            raise NotFoundError("Missing session reference")

        data = self._request(
            "GET",
            f"{self.config.base_url}/transactions/{quote(reference, safe='')}",
            headers={"Accept": "application/json", "User-Agent": self.config.user_agent},
        )
        logger.info(f"Fetched results for session {reference}")
        return data

    # ── Transport ────────────────────────────────────────────────────

    def _request(self, method: str, url: str, **kwargs) -> dict:
        try:
            response = self.session.request(
                method, url, auth=self._auth, timeout=self.config.timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.error(f"Provider call {method} {url} failed: {e}")
            raise UpstreamError(f"Could not reach verification provider: {e}") from e

        if response.status_code == 404:
            raise NotFoundError("Unknown session reference")
        if not response.ok:
            logger.warning(f"Provider call {method} {url} returned {response.status_code}")
            raise UpstreamError(
                f"Verification provider returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Verification provider returned a non-JSON body") from e
        if not isinstance(data, dict):
            raise UpstreamError("Verification provider returned an unexpected payload")
        return data

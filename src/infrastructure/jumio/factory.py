"""
Provider factory — builds the relay once from settings.

Missing credentials are a deployment problem: they are reported at
startup and every provider call then fails with the same error.
"""
import logging

from src.config.settings import Settings
from src.core.exceptions import ConfigurationError
from src.core.interfaces.verification_provider import IVerificationProvider, SessionStart
from src.infrastructure.jumio.jumio_relay import JumioRelay, RelayConfig

logger = logging.getLogger(__name__)


class UnconfiguredProvider(IVerificationProvider):
    """Stands in for the relay when credentials are absent."""

    def __init__(self, error: ConfigurationError):
        self.error = error

    def start_session(self, user_reference: str | None = None) -> SessionStart:
        raise self.error

    def fetch_result(self, session_id: str) -> dict:
        raise self.error


def build_provider(settings: Settings) -> IVerificationProvider:
    try:
        config = RelayConfig.from_settings(settings)
    except ConfigurationError as e:
        logger.error(f"Verification relay disabled: {e}")
        return UnconfiguredProvider(e)
    logger.info(f"Verification relay configured for {config.base_url}")
    return JumioRelay(config)

"""
Contract: Capture Listener

The document-capture widget is vendor-controlled and callback-driven.
It only needs somewhere to report back to.
"""

from abc import ABC, abstractmethod


class ICaptureListener(ABC):
    """Port: receives the capture widget's outcome."""

    @abstractmethod
    def on_success(self, session_id: str) -> None:
        """Capture finished; results can be fetched for ``session_id``."""
        ...

    @abstractmethod
    def on_error(self, reason: str) -> None:
        """Capture was cancelled or failed."""
        ...

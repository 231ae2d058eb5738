"""
Contract: Reconciliation Engine

Compares what the applicant typed in against what the provider read off
the document. Pure, synchronous, no side effects.
"""

from abc import ABC, abstractmethod

from src.core.entities.document import DocumentRecord
from src.core.entities.match_report import MatchReport
from src.core.entities.registration import RegistrationRecord


class IReconciliationEngine(ABC):
    """
    Port: Reconciliation Engine

    Scores each registration field against its document counterpart and
    derives an aggregate verdict.
    """

    @abstractmethod
    def reconcile(self, registration: RegistrationRecord, document: DocumentRecord) -> MatchReport:
        """
        Compare a registration with a document.

        Args:
            registration: Applicant-entered record.
            document: Provider-extracted record (fields may be empty).

        Returns:
            MatchReport with one FieldCheck per compared field.
        """
        ...

"""
Identity Reconciliation Rules.

Checks, in order:
1. Date of birth — exact
2. Postcode — exact after normalization
3. Last name — similarity >= 85
4. First name — similarity >= 85
5. Address line (house number + street) — similarity >= 70
6. City — similarity >= 80, reported but not part of the verdict
7. Document rules — only a home-country driving license verifies the address
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Tuple

from src.core.entities.document import DocType, DocumentRecord
from src.core.entities.match_report import FieldCheck, MatchReport
from src.core.entities.registration import RegistrationRecord
from src.core.interfaces.reconciliation_engine import IReconciliationEngine
from src.infrastructure.rules.similarity import normalize_postcode, similarity

HOME_DOCUMENT: Tuple[str, str] = (DocType.DRIVING_LICENSE.value, "GBR")
DEFAULT_ACCEPTED_DOCUMENTS: List[Tuple[str, str]] = [HOME_DOCUMENT]


class IdentityReconciliationEngine(IReconciliationEngine):
    """Registration vs document matching with fixed thresholds."""

    def __init__(
        self,
        name_threshold: float = 85.0,
        address_threshold: float = 70.0,
        city_threshold: float = 80.0,
        accepted_documents: Iterable[Tuple[str, str]] | None = None,
    ):
        self.name_threshold = name_threshold
        self.address_threshold = address_threshold
        self.city_threshold = city_threshold
        pairs = accepted_documents if accepted_documents is not None else DEFAULT_ACCEPTED_DOCUMENTS
        self.accepted_documents = {(t, c) for t, c in pairs}

    def reconcile(self, registration: RegistrationRecord, document: DocumentRecord) -> MatchReport:
        """Run every check; the report derives ``passed`` from them."""
        return MatchReport(checks=[
            self._check_dob(registration, document),
            self._check_postcode(registration, document),
            self._fuzzy("Last Name", registration.last_name, document.last_name, self.name_threshold),
            self._fuzzy("First Name", registration.first_name, document.first_name, self.name_threshold),
            self._fuzzy("Address Match", registration.full_address, document.address_line,
                        self.address_threshold),
            # city is informational only
            self._fuzzy("City", registration.city, document.city, self.city_threshold,
                        counts_toward_decision=False),
            self._check_document_rules(document),
        ])

    # ── Checks ───────────────────────────────────────────────────────

    @staticmethod
    def _exact(label: str, reg: str, doc: str) -> FieldCheck:
        ok = reg == doc
        return FieldCheck(field=label, reg=reg, doc=doc, match=ok,
                          message="Match" if ok else "Mismatch")

    def _check_dob(self, registration: RegistrationRecord, document: DocumentRecord) -> FieldCheck:
        dob = registration.date_of_birth
        reg = dob.isoformat() if hasattr(dob, "isoformat") else str(dob or "")
        return self._exact("Date of Birth", reg, document.date_of_birth)

    def _check_postcode(self, registration: RegistrationRecord, document: DocumentRecord) -> FieldCheck:
        return self._exact("Postcode", normalize_postcode(registration.postcode),
                           normalize_postcode(document.postal_code))

    @staticmethod
    def _fuzzy(label: str, reg: str | None, doc: str | None, threshold: float,
               counts_toward_decision: bool = True) -> FieldCheck:
        score = similarity(reg, doc)
        return FieldCheck(
            field=label,
            reg=reg or "",
            doc=doc or "",
            match=score >= threshold,
            message=f"Similarity: {_whole_percent(score)}%",
            score=round(score, 2),
            counts_toward_decision=counts_toward_decision,
        )

    def _check_document_rules(self, document: DocumentRecord) -> FieldCheck:
        # exact, case-sensitive match
        pair = (document.doc_type, document.issuing_country)
        if pair in self.accepted_documents:
            label = "UK Driving License" if pair == HOME_DOCUMENT else f"{pair[1]} {pair[0]}"
            return FieldCheck(field="Document Rules", reg="UK Logic", doc=label,
                              match=True, message="Address verified via License.")
        return FieldCheck(
            field="Document Rules",
            reg="UK Logic",
            doc=f"{pair[1] or DocType.UNKNOWN.value} {pair[0] or DocType.UNKNOWN.value}",
            match=False,
            message="Non-UK Driving License. Proof of Address required.",
        )


def _whole_percent(score: float) -> int:
    """Round half up, as the score is displayed to applicants."""
    return int(Decimal(score).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

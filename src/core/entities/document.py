"""
Entity: Document Record

Identity fields extracted by the verification provider from a scanned
document. Read-only input from an external system: any field may be
missing, in which case it is an empty string.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from src.core.exceptions import ReconciliationError

logger = logging.getLogger(__name__)


class DocType(str, Enum):
    DRIVING_LICENSE = "DRIVING_LICENSE"
    PASSPORT = "PASSPORT"
    ID_CARD = "ID_CARD"
    VISA = "VISA"
    UNKNOWN = "UNKNOWN"


# payload path -> attribute
_DOCUMENT_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "dob": "date_of_birth",
    "type": "doc_type",
    "issuingCountry": "issuing_country",
}
_ADDRESS_FIELDS = {
    "postalCode": "postal_code",
    "line1": "address_line",
    "city": "city",
}


def _as_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return ""
    return str(value)


@dataclass(frozen=True)
class DocumentRecord:
    """Fields read from the provider's extraction payload."""
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""       # as returned, ex: "1990-01-01"
    postal_code: str = ""
    address_line: str = ""
    city: str = ""
    doc_type: str = ""            # raw provider value, ex: "DRIVING_LICENSE"
    issuing_country: str = ""     # ISO 3166-1 alpha-3, ex: "GBR"

    @classmethod
    def from_payload(cls, payload) -> "DocumentRecord":
        """
        Build a record from a provider transaction payload.

        Missing sections and fields degrade to empty strings so the match
        report still renders with explicit mismatches.

        Raises:
            ReconciliationError: payload is not a JSON object.
        """
        if not isinstance(payload, dict):
            raise ReconciliationError(
                f"Extraction payload must be an object, got {type(payload).__name__}"
            )

        document = payload.get("document")
        if not isinstance(document, dict):
            logger.warning("Extraction payload has no document section")
            document = {}
        address = document.get("address")
        if not isinstance(address, dict):
            address = {}

        values = {}
        missing = []
        for source, key_map in ((document, _DOCUMENT_FIELDS), (address, _ADDRESS_FIELDS)):
            for key, attr in key_map.items():
                values[attr] = _as_text(source.get(key))
                if not values[attr]:
                    missing.append(key)

        if missing:
            logger.warning(f"Extraction payload missing fields: {', '.join(missing)}")

        return cls(**values)

"""Reconcile a stored provider payload against a registration JSON, offline.

Usage:
    python scripts/reconcile_payload.py --registration reg.json --payload transaction.json
"""
import argparse
import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env"))

from src.api.schemas.requests import RegistrationRequest
from src.config.settings import get_settings
from src.core.entities.document import DocumentRecord
from src.infrastructure.rules.identity_rules import IdentityReconciliationEngine


def main():
    parser = argparse.ArgumentParser(description="Reconcile a registration against a provider payload")
    parser.add_argument("--registration", required=True, help="Registration JSON (form field names)")
    parser.add_argument("--payload", required=True, help="Provider transaction JSON")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    args = parser.parse_args()

    with open(args.registration, encoding="utf-8") as f:
        registration = RegistrationRequest.model_validate(json.load(f)).to_record()
    with open(args.payload, encoding="utf-8") as f:
        document = DocumentRecord.from_payload(json.load(f))

    settings = get_settings()
    engine = IdentityReconciliationEngine(
        name_threshold=settings.name_threshold,
        address_threshold=settings.address_threshold,
        city_threshold=settings.city_threshold,
        accepted_documents=settings.accepted_documents,
    )
    report = engine.reconcile(registration, document)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0 if report.passed else 1

    print("=" * 70)
    print(f"  Verification {'PASSED' if report.passed else 'FAILED'}")
    print("=" * 70)
    for check in report.checks:
        status = "Pass" if check.match else "Fail"
        note = "" if check.counts_toward_decision else "  (not in verdict)"
        print(f"  {check.field:<16} {status:<5} {check.message}{note}")
        print(f"  {'':<16} reg={check.reg!r} doc={check.doc!r}")
    return 0 if report.passed else 1


if __name__ == "__main__":
    sys.exit(main())

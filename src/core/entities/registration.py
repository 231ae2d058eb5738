"""
Entity: Registration Record

Identity and address details entered by the applicant. Created once per
session from the form; immutable once submitted for matching.
"""

from dataclasses import dataclass
from datetime import date

from src.core.exceptions import BadRequestError


@dataclass(frozen=True)
class RegistrationRecord:
    """Self-reported identity of the applicant."""
    first_name: str
    last_name: str
    date_of_birth: date
    house_number: str
    street: str
    postcode: str
    city: str
    flat: str | None = None       # ex: "Apt 4B"

    @property
    def full_address(self) -> str:
        """House number and street as printed on an address line."""
        return f"{self.house_number} {self.street}".strip()

    def validate(self) -> None:
        """The form will not leave the Register step without these."""
        missing = [
            name for name in ("house_number", "street", "postcode")
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise BadRequestError(f"Missing registration fields: {', '.join(missing)}")

"""
Pydantic schemas — Request bodies for the API.

Field aliases follow the form's camelCase names; snake_case is accepted too.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.core.entities.registration import RegistrationRecord


class StartSessionRequest(BaseModel):
    model_config = {"populate_by_name": True}

    user_reference: str | None = Field(default=None, alias="userReference")
    user_email: str | None = Field(default=None, alias="userEmail")

    @property
    def reference(self) -> str | None:
        return self.user_reference or self.user_email


class RegistrationRequest(BaseModel):
    model_config = {"populate_by_name": True}

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    date_of_birth: date = Field(alias="dob")
    house_number: str = Field(default="", alias="houseNo")
    street: str = ""
    flat: str | None = None
    postcode: str = ""
    city: str = ""

    def to_record(self) -> RegistrationRecord:
        return RegistrationRecord(
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            house_number=self.house_number,
            street=self.street,
            flat=self.flat or None,
            postcode=self.postcode,
            city=self.city,
        )


class ReconcileRequest(BaseModel):
    registration: RegistrationRequest
    reference: str | None = None
    payload: dict | None = None

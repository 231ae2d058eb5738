"""
Pydantic schemas — Response models for the API.
"""

from pydantic import BaseModel

from src.core.entities.match_report import MatchReport


class FieldCheckResponse(BaseModel):
    field: str
    reg: str
    doc: str
    match: bool
    message: str
    score: float | None = None
    counts_toward_decision: bool = True


class MatchReportResponse(BaseModel):
    passed: bool
    checks: list[FieldCheckResponse]

    @classmethod
    def from_report(cls, report: MatchReport) -> "MatchReportResponse":
        return cls(**report.to_dict())


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
    relay_configured: bool

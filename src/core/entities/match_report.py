"""
Entity: Match Report

Outcome of reconciling a registration against a document: one row per
compared field plus the aggregate verdict.
"""

from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class FieldCheck:
    """One compared field."""
    field: str                    # ex: "Last Name"
    reg: str                      # registration side, post-normalization
    doc: str                      # document side, post-normalization
    match: bool
    message: str                  # "Match" / "Mismatch" / "Similarity: 80%"
    score: float | None = None    # similarity in [0, 100] for fuzzy checks
    counts_toward_decision: bool = True


@dataclass
class MatchReport:
    """Ordered field checks. ``passed`` is derived from them."""
    checks: list[FieldCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.match for c in self.checks if c.counts_toward_decision)

    @property
    def failed_fields(self) -> list[str]:
        return [c.field for c in self.checks if not c.match]

    def get(self, field_name: str) -> FieldCheck | None:
        for check in self.checks:
            if check.field == field_name:
                return check
        return None

    def to_dict(self) -> dict:
        return {
            "passed": self.passed,
            "checks": [asdict(c) for c in self.checks],
        }

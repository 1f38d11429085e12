"""Business-rule validation for contract submissions.

Validators never raise on bad input. Every rule is checked and each violation
is appended to a `ValidationOutcome`, so the API can return HTTP 400 with the
full, ordered list of field errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from contract_api.contracts.schemas import ContractDTO


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationOutcome:
    """Ordered (field, message) pairs; empty means valid."""

    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field_name, message))

    def fields(self) -> List[str]:
        return [e.field for e in self.errors]

    def messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def as_pairs(self) -> List[Tuple[str, str]]:
        return [(e.field, e.message) for e in self.errors]

    def to_payload(self) -> Dict[str, Any]:
        return {"errors": [e.as_dict() for e in self.errors]}

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


NAME_REQUIRED = "Name is required."
START_REQUIRED = "StartDate is required."
END_REQUIRED = "EndDate is required."
START_BEFORE_END = "StartDate must be before EndDate."

_REQUEST_SOURCES = ("body", "path", "query", "header", "cookie")


def validate_contract(dto: ContractDTO) -> ValidationOutcome:
    outcome = ValidationOutcome()

    # Strictly empty only; whitespace-only names are accepted
    if dto.name == "":
        outcome.add("name", NAME_REQUIRED)

    if dto.start_date is None:
        outcome.add("startDate", START_REQUIRED)
    if dto.end_date is None:
        outcome.add("endDate", END_REQUIRED)
    if dto.start_date is not None and dto.end_date is not None and not dto.start_date < dto.end_date:
        outcome.add("startDate", START_BEFORE_END)

    return outcome


def outcome_from_request_errors(errors: Iterable[Dict[str, Any]]) -> ValidationOutcome:
    """Translate pydantic/FastAPI request errors into a ValidationOutcome."""
    outcome = ValidationOutcome()
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _REQUEST_SOURCES:
            loc = loc[1:]
        # malformed JSON reports a character offset, not a field
        if err.get("type") == "json_invalid" or not all(isinstance(p, str) for p in loc):
            loc = []
        outcome.add(".".join(loc) or "body", err.get("msg", "Invalid value"))
    return outcome

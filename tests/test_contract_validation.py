"""
Validation-centric tests for contract submissions.

Run:
    pytest tests/test_contract_validation.py -q
"""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from contract_api.contracts.schemas import ContractDTO
from contract_api.contracts.validation import (
    END_REQUIRED,
    NAME_REQUIRED,
    START_BEFORE_END,
    START_REQUIRED,
    outcome_from_request_errors,
    validate_contract,
)

JAN = datetime(2025, 1, 1)
JUN = datetime(2025, 6, 1)


def _dto(name="Acme", start=JAN, end=JUN) -> ContractDTO:
    return ContractDTO(name=name, start_date=start, end_date=end)


def test_valid_contract_has_empty_outcome():
    outcome = validate_contract(_dto())
    assert outcome.is_valid
    assert len(outcome) == 0
    assert outcome.to_payload() == {"errors": []}


@pytest.mark.parametrize(
    "start,end",
    [(JAN, JUN), (JUN, JAN), (JAN, JAN), (None, JUN), (JAN, None), (None, None)],
)
def test_empty_name_is_never_valid(start, end):
    outcome = validate_contract(_dto(name="", start=start, end=end))
    assert not outcome.is_valid
    assert ("name", NAME_REQUIRED) in outcome.as_pairs()


def test_whitespace_name_is_not_trimmed():
    assert validate_contract(_dto(name="   ")).is_valid


@pytest.mark.parametrize("start,end", [(JUN, JAN), (JAN, JAN)])
def test_start_not_before_end_reports_ordering(start, end):
    outcome = validate_contract(_dto(start=start, end=end))
    assert outcome.as_pairs() == [("startDate", START_BEFORE_END)]


def test_one_microsecond_apart_is_valid():
    assert validate_contract(_dto(start=JAN, end=JAN.replace(microsecond=1))).is_valid


def test_all_violations_are_reported_in_rule_order():
    outcome = validate_contract(_dto(name="", start=JUN, end=JAN))
    assert outcome.as_pairs() == [("name", NAME_REQUIRED), ("startDate", START_BEFORE_END)]
    assert outcome.fields() == ["name", "startDate"]
    assert outcome.to_payload() == {
        "errors": [
            {"field": "name", "message": "Name is required."},
            {"field": "startDate", "message": "StartDate must be before EndDate."},
        ]
    }


def test_missing_dates_are_required_and_skip_ordering():
    outcome = validate_contract(ContractDTO(name="Acme"))
    assert outcome.as_pairs() == [("startDate", START_REQUIRED), ("endDate", END_REQUIRED)]
    assert START_BEFORE_END not in outcome.messages()


def test_aware_dates_are_compared_in_utc():
    dto = ContractDTO.model_validate(
        {"name": "Acme", "startDate": "2025-01-01T02:00:00+02:00", "endDate": "2025-01-01T00:30:00Z"}
    )
    assert dto.start_date == datetime(2025, 1, 1, 0, 0)
    assert dto.start_date.tzinfo is None
    assert validate_contract(dto).is_valid


def test_request_errors_are_translated_without_body_prefix():
    outcome = outcome_from_request_errors(
        [
            {"loc": ("body", "startDate"), "msg": "Input should be a valid datetime"},
            {"loc": ("body",), "msg": "Field required"},
        ]
    )
    assert outcome.as_pairs() == [
        ("startDate", "Input should be a valid datetime"),
        ("body", "Field required"),
    ]


def test_request_error_prefixes_are_stripped():
    outcome = outcome_from_request_errors(
        [
            {"loc": ("path", "contract_id"), "msg": "Input should be a valid integer"},
            {"loc": ("query", "limit"), "msg": "Input should be a valid integer"},
        ]
    )
    assert outcome.fields() == ["contract_id", "limit"]


def test_malformed_json_is_reported_on_body():
    outcome = outcome_from_request_errors([{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}])
    assert outcome.as_pairs() == [("body", "JSON decode error")]


def test_out_of_range_offset_is_a_validation_error():
    with pytest.raises(ValidationError) as exc:
        ContractDTO.model_validate({"name": "Acme", "startDate": "0001-01-01T00:00:00+01:00", "endDate": "2025-06-01"})
    assert exc.value.errors()[0]["loc"] == ("startDate",)

from datetime import datetime

from contract_api.contracts.mapper import to_record, to_response, to_transfer
from contract_api.contracts.schemas import ContractDTO
from contract_api.database.models import Contract


def test_to_record_copies_fields_and_leaves_id_unset():
    dto = ContractDTO(name="Acme", start_date=datetime(2025, 1, 1), end_date=datetime(2025, 6, 1))
    record = to_record(dto)
    assert isinstance(record, Contract)
    assert record.id is None
    assert (record.name, record.start_date, record.end_date) == ("Acme", dto.start_date, dto.end_date)


def test_transfer_round_trip_preserves_fields():
    dto = ContractDTO(name="Globex", start_date=datetime(2024, 3, 1, 9, 30), end_date=datetime(2026, 3, 1))
    assert to_transfer(to_record(dto)) == dto


def test_to_transfer_drops_identifier():
    record = Contract(id=42, name="Initech", start_date=datetime(2025, 1, 1), end_date=datetime(2025, 2, 1))
    dto = to_transfer(record)
    assert "id" not in dto.model_dump()
    assert dto.name == "Initech"


def test_to_response_uses_camel_case_keys():
    record = Contract(id=7, name="Acme", start_date=datetime(2025, 1, 1), end_date=datetime(2025, 6, 1))
    body = to_response(record).model_dump(by_alias=True, mode="json")
    assert body == {
        "id": 7,
        "name": "Acme",
        "startDate": "2025-01-01T00:00:00",
        "endDate": "2025-06-01T00:00:00",
    }

"""Field-for-field conversion between contract DTOs and records."""

from __future__ import annotations

from contract_api.contracts.schemas import ContractDTO, ContractResponse
from contract_api.database.models import Contract


def to_record(dto: ContractDTO) -> Contract:
    """Build an unsaved record. The id is left unset for the repository to assign."""
    return Contract(name=dto.name, start_date=dto.start_date, end_date=dto.end_date)


def to_transfer(record: Contract) -> ContractDTO:
    return ContractDTO(name=record.name, start_date=record.start_date, end_date=record.end_date)


def to_response(record: Contract) -> ContractResponse:
    return ContractResponse(id=record.id, name=record.name, start_date=record.start_date, end_date=record.end_date)

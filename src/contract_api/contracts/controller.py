"""Controller for contract creation and lookup."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from contract_api.contracts.mapper import to_record
from contract_api.contracts.schemas import ContractDTO
from contract_api.contracts.validation import ValidationOutcome, validate_contract
from contract_api.database.errors import StorageError
from contract_api.database.interfaces import ContractStore
from contract_api.database.models import Contract

logger = logging.getLogger(__name__)


@dataclass
class CreateResult:
    """Outcome of a create request: either a stored contract or validation errors."""

    contract: Optional[Contract] = None
    validation: ValidationOutcome = field(default_factory=ValidationOutcome)

    @property
    def ok(self) -> bool:
        return self.validation.is_valid


class ContractController:

    def __init__(self, db: ContractStore) -> None:
        self.db = db

    def create_contract(self, dto: ContractDTO) -> CreateResult:
        """
        Validate, map and persist a new contract.

        Invalid input returns a result carrying the validation outcome and the
        repository is never called. StorageError from the repository propagates.
        """
        outcome = validate_contract(dto)
        if not outcome.is_valid:
            logger.info("Rejected contract: %s", outcome.as_pairs())
            return CreateResult(validation=outcome)

        record = to_record(dto)
        stored = self.db.add_contract(record)
        if stored is None:
            raise StorageError("Contract store returned no record")
        return CreateResult(contract=stored)

    def get_contract(self, contract_id: int) -> Contract:
        return self.db.get_contract(contract_id)

    def list_contracts(self) -> List[Contract]:
        return self.db.list_contracts()

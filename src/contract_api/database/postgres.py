"""
Lightweight in-memory contract repository for local development.

This provides the same interface as the SQLAlchemy-backed repository so the
API can run without a real database. It is NOT intended for production use.
"""

from __future__ import annotations

import itertools
import threading
from typing import Dict, List

from contract_api.database.errors import NotFoundError
from contract_api.database.interfaces import ContractStore
from contract_api.database.models import Contract


def _copy(record: Contract) -> Contract:
    return Contract(id=record.id, name=record.name, start_date=record.start_date, end_date=record.end_date)


class InMemoryContractRepository(ContractStore):
    """
    In-memory stand-in for the SQLAlchemy contract repository.

    Identifiers are assigned sequentially from 1. Records are copied on the
    way in and out so callers never hold a reference into the store.
    """

    def __init__(self) -> None:
        self._contracts: Dict[int, Contract] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------ #
    # Schema / lifecycle
    # ------------------------------------------------------------------ #
    def create_tables(self) -> None:
        """No-op for the in-memory store."""
        return None

    def ping(self) -> bool:
        return True

    # ------------------------------------------------------------------ #
    # Contracts
    # ------------------------------------------------------------------ #
    def add_contract(self, record: Contract) -> Contract:
        with self._lock:
            stored = _copy(record)
            stored.id = next(self._ids)
            self._contracts[stored.id] = stored
            return _copy(stored)

    def get_contract(self, contract_id: int) -> Contract:
        with self._lock:
            stored = self._contracts.get(contract_id)
            if stored is None:
                raise NotFoundError(contract_id)
            return _copy(stored)

    def list_contracts(self) -> List[Contract]:
        with self._lock:
            return [_copy(self._contracts[k]) for k in sorted(self._contracts)]

    def update_contract(self, record: Contract) -> Contract:
        with self._lock:
            if record.id not in self._contracts:
                raise NotFoundError(record.id)
            self._contracts[record.id] = _copy(record)
            return _copy(record)

    def delete_contract(self, contract_id: int) -> None:
        with self._lock:
            if self._contracts.pop(contract_id, None) is None:
                raise NotFoundError(contract_id)

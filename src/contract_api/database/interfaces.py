from abc import ABC, abstractmethod
from typing import List

from contract_api.database.models import Contract


class ContractStore(ABC):
    """Every contract repository must implement this interface.

    Operations raise StorageError when the backing store is unreachable or
    rejects the operation, and NotFoundError when the id does not exist.
    """

    # -- Lifecycle --

    @abstractmethod
    def create_tables(self) -> None:
        """Create the schema if it is missing."""

    @abstractmethod
    def ping(self) -> bool:
        """Return True when the store answers."""

    # -- Contracts --

    @abstractmethod
    def add_contract(self, record: Contract) -> Contract:
        """Insert a new record and return it with its assigned id."""

    @abstractmethod
    def get_contract(self, contract_id: int) -> Contract:
        """Fetch a record by id."""

    @abstractmethod
    def list_contracts(self) -> List[Contract]:
        """Return every record ordered by id."""

    @abstractmethod
    def update_contract(self, record: Contract) -> Contract:
        """Overwrite the name and dates of an existing record."""

    @abstractmethod
    def delete_contract(self, contract_id: int) -> None:
        """Remove a record by id."""

"""Failure types raised by contract repositories."""


class StorageError(Exception):
    """The backing store is unreachable or rejected the operation."""


class NotFoundError(Exception):
    """No contract exists with the requested identifier."""

    def __init__(self, contract_id: int) -> None:
        self.contract_id = contract_id
        super().__init__(f"Contract {contract_id} not found")

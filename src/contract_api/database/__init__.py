"""
Persistence layer for contract records
"""
from .errors import NotFoundError, StorageError
from .models import Base, Contract

__all__ = [
    'Base',
    'Contract',
    'NotFoundError',
    'StorageError',
]

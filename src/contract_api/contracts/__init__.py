"""
Contract DTOs, validation, mapping and orchestration
"""
from .controller import ContractController, CreateResult
from .mapper import to_record, to_response, to_transfer
from .schemas import ContractDTO, ContractResponse
from .validation import FieldError, ValidationOutcome, validate_contract

__all__ = [
    'ContractController',
    'ContractDTO',
    'ContractResponse',
    'CreateResult',
    'FieldError',
    'ValidationOutcome',
    'to_record',
    'to_response',
    'to_transfer',
    'validate_contract',
]

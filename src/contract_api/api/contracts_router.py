"""
API endpoints for contract records.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from contract_api.api.dependencies import get_db
from contract_api.contracts.controller import ContractController
from contract_api.contracts.mapper import to_response
from contract_api.contracts.schemas import ContractDTO, ContractResponse, ErrorResponse, ValidationErrorResponse

api = APIRouter()


@api.post(
    "/contracts",
    response_model=ContractResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Contracts"],
)
def create_contract(dto: ContractDTO, db=Depends(get_db)):
    result = ContractController(db).create_contract(dto)
    if not result.ok:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.validation.to_payload())
    return to_response(result.contract)


@api.get("/contracts", response_model=List[ContractResponse], tags=["Contracts"])
def list_contracts(db=Depends(get_db)):
    return [to_response(c) for c in ContractController(db).list_contracts()]


@api.get(
    "/contracts/{contract_id}",
    response_model=ContractResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["Contracts"],
)
def get_contract(contract_id: int, db=Depends(get_db)):
    # NotFoundError is turned into a 404 by the app-level handler
    return to_response(ContractController(db).get_contract(contract_id))

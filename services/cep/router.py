from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from models.correios.errors import (
    CepError,
    CepNotFoundError,
    CepTransportError,
    CepValidationError,
    UnexpectedResponseError,
)
from models.correios.options import RequestOptions
from .schemas import AddressResponse, ErrorResponse
from .service import CEPService, get_cep_service

router = APIRouter(prefix="/api/v1/cep", tags=["cep"])

ERROR_STATUS = {
    CepValidationError: 422,
    CepNotFoundError: 404,
    UnexpectedResponseError: 502,
    CepTransportError: 503,
}


def get_request_options() -> RequestOptions:
    return RequestOptions.from_env()


@router.get(
    "/{cep}",
    response_model=AddressResponse,
    responses={status: {"model": ErrorResponse} for status in (404, 422, 502, 503)},
)
async def get_address(
    cep: str,
    connection_timeout: Optional[int] = Query(default=None, gt=0),
    request_timeout: Optional[int] = Query(default=None, gt=0),
    service: CEPService = Depends(get_cep_service),
    options: RequestOptions = Depends(get_request_options),
):
    """Consulta endereço por CEP."""
    overrides = {
        "connection_timeout": connection_timeout,
        "request_timeout": request_timeout,
    }
    options = options.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    result = await service.find_address(cep, options)
    if isinstance(result, CepError):
        raise HTTPException(
            status_code=ERROR_STATUS.get(type(result), 500), detail=result.reason
        )

    return AddressResponse.from_address(result)

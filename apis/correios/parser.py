from typing import Any, Dict, Optional, Union
from xml.etree.ElementTree import ParseError

import structlog
from pydantic import ValidationError

from apis.correios.transport import RawResponse
from apis.helpers.xml_to_dict import xml_to_dict
from models.correios.address import Address
from models.correios.errors import (
    CepError,
    CepNotFoundError,
    CepTransportError,
    UnexpectedResponseError,
)

logger = structlog.get_logger(__name__)

UNEXPECTED_RESPONSE = "unexpected response"

# O campo <bairro> pode vir como "Bairro - Complemento"
NEIGHBORHOOD_COMPLEMENT_SEPARATOR = " - "

REQUIRED_FIELDS = ("cidade", "uf", "cep")
OPTIONAL_FIELDS = ("end", "bairro", "complemento", "complemento2")


def _text(value: Any) -> Optional[str]:
    """Texto de um nó convertido por xml_to_dict, ou None se não for folha."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, dict) and "_text" in value:
        return value["_text"].strip()
    return None


def split_neighborhood(raw: str):
    """Separa "Bairro - Complemento" em (bairro, complemento)."""
    neighborhood, _, complement = raw.partition(NEIGHBORHOOD_COMPLEMENT_SEPARATOR)
    return neighborhood.strip(), complement.strip()


def _find_fault_message(body: Dict[str, Any]) -> Optional[str]:
    fault = body.get("Fault")
    if not isinstance(fault, dict):
        return None

    message = _text(fault.get("faultstring"))
    if message:
        return message

    detail = fault.get("detail")
    if isinstance(detail, dict):
        return _text(detail.get("SigepClienteException")) or None

    return None


def _build_address(body: Dict[str, Any]) -> Optional[Address]:
    response = body.get("consultaCEPResponse")
    if not isinstance(response, dict):
        return None

    data = response.get("return")
    if not isinstance(data, dict):
        return None

    fields = {}
    for name in REQUIRED_FIELDS:
        if name not in data:
            return None
        fields[name] = _text(data[name])

    for name in OPTIONAL_FIELDS:
        fields[name] = _text(data.get(name))

    if any(value is None for value in fields.values()):
        return None

    neighborhood, extra_complement = split_neighborhood(fields["bairro"])
    complement = NEIGHBORHOOD_COMPLEMENT_SEPARATOR.join(
        part
        for part in (fields["complemento"], fields["complemento2"], extra_complement)
        if part
    )

    try:
        return Address(
            zipcode=fields["cep"],
            street=fields["end"],
            neighborhood=neighborhood,
            city=fields["cidade"],
            state=fields["uf"],
            complement=complement,
        )
    except ValidationError as e:
        logger.warning("invalid_address_payload", errors=e.errors())
        return None


def parse_ok(raw: RawResponse) -> Union[Address, CepError]:
    """Converte o corpo SOAP em Address ou CepError.

    O status HTTP não é considerado: os Correios respondem fault com 500 e
    sucesso com 200, e o que decide é o formato do XML.
    """
    try:
        document = xml_to_dict(raw.body)
    except (ParseError, ValueError, RecursionError) as e:
        logger.error("unexpected_response", reason="invalid XML", error=str(e))
        return UnexpectedResponseError(f"{UNEXPECTED_RESPONSE}: invalid XML ({e})")

    body = document.get("Body") if isinstance(document, dict) else None
    if not isinstance(body, dict):
        logger.error("unexpected_response", status_code=raw.status_code)
        return UnexpectedResponseError(UNEXPECTED_RESPONSE)

    message = _find_fault_message(body)
    if message:
        logger.info("soap_fault", reason=message, status_code=raw.status_code)
        return CepNotFoundError(message)

    address = _build_address(body)
    if address is not None:
        return address

    logger.error("unexpected_response", status_code=raw.status_code)
    return UnexpectedResponseError(UNEXPECTED_RESPONSE)


def parse_error(error: Exception) -> CepTransportError:
    description = getattr(error, "description", None) or str(error)
    return CepTransportError.new(description or error.__class__.__name__)

# Flake8: noqa
from .correios.correios_api_client import CorreiosApiClient
from .correios.transport import RawResponse, SoapRequest, SoapTransport
from .correios.parser import parse_error, parse_ok
from .correios.payloads.consulta_cep import build_consulta_cep_request

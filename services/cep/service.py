import logging
from typing import Optional, Union

from apis.correios.correios_api_client import CorreiosApiClient
from apis.correios.parser import parse_error, parse_ok
from apis.correios.payloads.consulta_cep import build_consulta_cep_request
from apis.correios.transport import SoapTransport
from models.correios.address import Address
from models.correios.errors import CepError, TransportFailure
from models.correios.options import RequestOptions
from services.cep.validator import validate_zipcode

logger = logging.getLogger(__name__)


class CEPService:
    """Consulta endereços pelo CEP direto no webservice dos Correios.

    CEPs com e sem o separador "-" são aceitos. O transporte é injetado;
    por padrão usa o CorreiosApiClient (aiohttp).
    """

    def __init__(
        self,
        transport: Optional[SoapTransport] = None,
        options: Optional[RequestOptions] = None,
    ):
        self.transport = transport or CorreiosApiClient()
        self.options = options

    async def find_address(
        self, zipcode: str, options: Optional[RequestOptions] = None
    ) -> Union[Address, CepError]:
        """Retorna o Address encontrado ou o CepError correspondente.

        Opções (RequestOptions):
          * connection_timeout: timeout de conexão em ms. Padrão 5000.
          * request_timeout: timeout de leitura da resposta em ms. Padrão 5000.
          * proxy: tupla (host, port).
          * proxy_auth: tupla (user, password), usada apenas com proxy.
          * url: URL completa do webservice dos Correios.
        """
        validated = validate_zipcode(zipcode)
        if isinstance(validated, CepError):
            logger.info(f"CEP rejeitado ({zipcode!r}): {validated.reason}")
            return validated

        options = options or self.options or RequestOptions()
        request = build_consulta_cep_request(validated, options)

        try:
            response = await self.transport.send(request, options)
        except TransportFailure as e:
            error = parse_error(e)
            logger.error(f"Erro de transporte ao consultar CEP {validated}: {error.reason}")
            return error

        return parse_ok(response)

    async def find_address_or_raise(
        self, zipcode: str, options: Optional[RequestOptions] = None
    ) -> Address:
        result = await self.find_address(zipcode, options)
        if isinstance(result, CepError):
            raise result
        return result


_default_service: Optional[CEPService] = None


def get_cep_service() -> CEPService:
    """Retorna a instância padrão do serviço de CEP"""
    global _default_service
    if _default_service is None:
        _default_service = CEPService()
    return _default_service


async def find_address(
    zipcode: str, options: Optional[RequestOptions] = None
) -> Union[Address, CepError]:
    return await get_cep_service().find_address(zipcode, options)


async def find_address_or_raise(
    zipcode: str, options: Optional[RequestOptions] = None
) -> Address:
    return await get_cep_service().find_address_or_raise(zipcode, options)

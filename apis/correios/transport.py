from abc import ABC, abstractmethod
from typing import Dict

from pydantic import BaseModel, ConfigDict

from models.correios.options import RequestOptions


class SoapRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    headers: Dict[str, str]
    body: str


class RawResponse(BaseModel):
    status_code: int
    body: str


class SoapTransport(ABC):
    @abstractmethod
    async def send(self, request: SoapRequest, options: RequestOptions) -> RawResponse:
        """Envia o envelope e retorna a resposta bruta.

        Qualquer falha de transporte (conexão, DNS, proxy, timeouts) deve ser
        lançada como TransportFailure. O status HTTP não é interpretado aqui.
        """
        pass

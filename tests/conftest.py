"""
Fixtures compartilhadas: respostas SOAP reais dos Correios e um transporte
fake que registra as chamadas.
"""

from typing import List, Optional

import pytest

from apis.correios.transport import RawResponse, SoapRequest, SoapTransport
from models.correios.errors import TransportFailure
from models.correios.options import RequestOptions

SUCCESS_XML = """<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
<soap:Body>
<ns2:consultaCEPResponse xmlns:ns2="http://cliente.bean.master.sigep.bsb.correios.com.br/">
<return>
<bairro>Cavaleiro</bairro>
<cep>54250610</cep>
<cidade>Jaboatão dos Guararapes</cidade>
<complemento2></complemento2>
<end>Rua Fernando Amorim</end>
<uf>PE</uf>
</return>
</ns2:consultaCEPResponse>
</soap:Body>
</soap:Envelope>"""

SUCCESS_WITH_COMBINED_NEIGHBORHOOD_XML = """<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
<soap:Body>
<ns2:consultaCEPResponse xmlns:ns2="http://cliente.bean.master.sigep.bsb.correios.com.br/">
<return>
<bairro>Centro - Edifício Central</bairro>
<cep>01001000</cep>
<cidade>São Paulo</cidade>
<complemento2>lado ímpar</complemento2>
<end>Praça da Sé</end>
<uf>SP</uf>
</return>
</ns2:consultaCEPResponse>
</soap:Body>
</soap:Envelope>"""

FAULT_XML = """<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
<soap:Body>
<soap:Fault>
<faultcode>soap:Server</faultcode>
<faultstring>CEP NAO ENCONTRADO</faultstring>
<detail>
<ns2:SigepClienteException xmlns:ns2="http://cliente.bean.master.sigep.bsb.correios.com.br/">CEP NAO ENCONTRADO</ns2:SigepClienteException>
</detail>
</soap:Fault>
</soap:Body>
</soap:Envelope>"""


class FakeTransport(SoapTransport):
    """Transporte em memória que devolve uma resposta fixa ou lança uma falha."""

    def __init__(
        self,
        body: str = SUCCESS_XML,
        status_code: int = 200,
        failure: Optional[TransportFailure] = None,
    ):
        self.body = body
        self.status_code = status_code
        self.failure = failure
        self.requests: List[SoapRequest] = []
        self.options: List[RequestOptions] = []

    async def send(self, request: SoapRequest, options: RequestOptions) -> RawResponse:
        self.requests.append(request)
        self.options.append(options)
        if self.failure is not None:
            raise self.failure
        return RawResponse(status_code=self.status_code, body=self.body)


@pytest.fixture
def success_transport():
    return FakeTransport(SUCCESS_XML)


@pytest.fixture
def fault_transport():
    return FakeTransport(FAULT_XML, status_code=500)

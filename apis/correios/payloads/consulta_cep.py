from apis.correios.transport import SoapRequest
from models.correios.options import RequestOptions

CORREIOS_NAMESPACE = "http://cliente.bean.master.sigep.bsb.correios.com.br/"

# O WSDL do AtendeCliente declara soapAction vazio para consultaCEP
SOAP_ACTION = '""'

REQUEST_HEADERS = {
    "Content-Type": "text/xml; charset=utf-8",
    "SOAPAction": SOAP_ACTION,
    "Cache-Control": "no-cache",
}


def build_consulta_cep_payload(zipcode: str) -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/" xmlns:cli="{CORREIOS_NAMESPACE}">
   <soapenv:Header/>
   <soapenv:Body>
      <cli:consultaCEP>
         <cep>{zipcode}</cep>
      </cli:consultaCEP>
   </soapenv:Body>
</soapenv:Envelope>"""


def build_consulta_cep_request(zipcode: str, options: RequestOptions) -> SoapRequest:
    """Monta a requisição SOAP para um CEP já normalizado (8 dígitos)."""
    return SoapRequest(
        url=options.url,
        headers=dict(REQUEST_HEADERS),
        body=build_consulta_cep_payload(zipcode),
    )

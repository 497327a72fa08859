import asyncio
from typing import Optional

import aiohttp
import structlog
from aiohttp import BasicAuth, ClientTimeout

from apis.correios.transport import RawResponse, SoapRequest, SoapTransport
from models.correios.errors import TransportFailure
from models.correios.options import RequestOptions

logger = structlog.get_logger(__name__)


class CorreiosApiClient(SoapTransport):
    """Transporte aiohttp para o webservice SIGEP dos Correios.

    Sem `start_session()` cada chamada abre e fecha a própria sessão; com uma
    sessão iniciada (ex.: durante o ciclo de vida da aplicação) ela é
    compartilhada entre as chamadas concorrentes.
    """

    def __init__(self):
        self.session: Optional[aiohttp.ClientSession] = None

    async def start_session(self):
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
            logger.info("session_created", status="success")

    async def close_session(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.info("session_closed", status="success")
        self.session = None

    async def __aenter__(self):
        await self.start_session()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close_session()

    @staticmethod
    def _timeout(options: RequestOptions) -> ClientTimeout:
        return ClientTimeout(
            connect=options.connection_timeout / 1000,
            sock_connect=options.connection_timeout / 1000,
            sock_read=options.request_timeout / 1000,
        )

    @staticmethod
    def _proxy_auth(options: RequestOptions) -> Optional[BasicAuth]:
        if not options.proxy:
            if options.proxy_auth:
                logger.warning("proxy_auth_ignored", reason="no proxy configured")
            return None
        if not options.proxy_auth:
            return None
        user, password = options.proxy_auth
        return BasicAuth(user, password)

    async def _post(
        self, session: aiohttp.ClientSession, request: SoapRequest, options: RequestOptions
    ) -> RawResponse:
        async with session.post(
            request.url,
            data=request.body.encode("utf-8"),
            headers=request.headers,
            proxy=options.proxy_url,
            proxy_auth=self._proxy_auth(options),
            timeout=self._timeout(options),
        ) as response:
            body = await response.text(errors="replace")
            logger.info("soap_response", url=request.url, status_code=response.status)
            return RawResponse(status_code=response.status, body=body)

    async def send(self, request: SoapRequest, options: RequestOptions) -> RawResponse:
        logger.debug("soap_request", url=request.url, proxy=options.proxy_url)

        try:
            if self.session and not self.session.closed:
                return await self._post(self.session, request, options)

            async with aiohttp.ClientSession() as session:
                return await self._post(session, request, options)

        except asyncio.TimeoutError as e:
            logger.error("transport_failure", url=request.url, error="timeout")
            raise TransportFailure(str(e) or "timeout") from e
        except aiohttp.ClientError as e:
            logger.error("transport_failure", url=request.url, error=str(e))
            raise TransportFailure(str(e) or e.__class__.__name__) from e

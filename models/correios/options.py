import os
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_URL = (
    "https://apps.correios.com.br/SigepMasterJPA/AtendeClienteService/AtendeCliente"
)


class RequestOptions(BaseModel):
    """Opções de requisição. Timeouts em milissegundos."""

    connection_timeout: int = Field(default=5000, gt=0)
    request_timeout: int = Field(default=5000, gt=0)
    proxy: Optional[Tuple[str, int]] = None
    proxy_auth: Optional[Tuple[str, str]] = None
    url: str = DEFAULT_URL

    @property
    def proxy_url(self) -> Optional[str]:
        if not self.proxy:
            return None
        host, port = self.proxy
        return f"http://{host}:{port}"

    @classmethod
    def from_env(cls) -> "RequestOptions":
        """Monta as opções a partir das variáveis CORREIOS_* (ou .env)."""
        data = {
            "connection_timeout": int(os.getenv("CORREIOS_CONNECTION_TIMEOUT", 5000)),
            "request_timeout": int(os.getenv("CORREIOS_REQUEST_TIMEOUT", 5000)),
            "url": os.getenv("CORREIOS_CEP_URL", DEFAULT_URL),
        }

        proxy_host = os.getenv("CORREIOS_PROXY_HOST")
        if proxy_host:
            data["proxy"] = (proxy_host, int(os.getenv("CORREIOS_PROXY_PORT", 8080)))

            proxy_user = os.getenv("CORREIOS_PROXY_USER")
            if proxy_user:
                data["proxy_auth"] = (
                    proxy_user,
                    os.getenv("CORREIOS_PROXY_PASSWORD", ""),
                )

        return cls(**data)

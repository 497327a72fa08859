class CepError(Exception):
    """Erro de domínio da consulta de CEP.

    O mesmo objeto é retornado por `find_address` e lançado por
    `find_address_or_raise`; `reason` é sempre a mensagem legível.
    """

    def __init__(self, reason: str):
        self.reason = str(reason)
        super().__init__(self.reason)

    @classmethod
    def new(cls, reason) -> "CepError":
        return cls(str(reason))

    @property
    def message(self) -> str:
        return self.reason

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(reason={self.reason!r})"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.reason == other.reason

    def __hash__(self) -> int:
        return hash((type(self), self.reason))


class CepValidationError(CepError):
    """CEP vazio ou fora do formato 99999-999 / 99999999."""

    pass


class CepNotFoundError(CepError):
    """SOAP fault retornado pelos Correios (ex.: CEP NAO ENCONTRADO)."""

    pass


class UnexpectedResponseError(CepError):
    """XML inválido ou em formato desconhecido."""

    pass


class CepTransportError(CepError):
    pass


class TransportFailure(Exception):
    """Falha de transporte (conexão, DNS, proxy, timeout)."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)

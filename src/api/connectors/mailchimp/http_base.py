"""Cliente HTTP base (síncrono) para o conector MailChimp."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import InfrastructureError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    auth: tuple[str, str] | None = None
    verify_ssl: bool = True


class HttpError(InfrastructureError):
    """Erro de transporte HTTP sem dados sensíveis."""


class HttpClient:
    """Cliente HTTP simples, uma requisição por chamada, sem retry.

    Reaproveita um único httpx.Client entre chamadas; use close() ou
    o context manager para liberá-lo.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = httpx.Client(
            base_url=self._config.base_url,
            auth=self._config.auth,
            headers=self._config.default_headers,
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
            transport=transport,
        )

    def request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Executa a requisição e devolve a resposta, qualquer que seja o status.

        Raises:
            HttpError: Em falhas de rede, timeout, protocolo ou ao montar
                a requisição (URL inválida, corpo não serializável em JSON).
        """
        try:
            return self._client.request(method, path, json=json)
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise HttpError("http_request_error") from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

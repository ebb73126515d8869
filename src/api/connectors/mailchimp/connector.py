"""Conector MailChimp (API v3) para membros de lista.

Cada operação faz no máximo uma chamada HTTP:
- status: GET lists/{list}/members/{hash}
- subscribe: POST lists/{list}/members/
- unsubscribe: PATCH lists/{list}/members/{hash}
- delete: DELETE lists/{list}/members/{hash}

Os métodos públicos devolvem o JSON decodificado ou None. Email inválido,
lista ausente, falha de rede e status não-2xx resultam todos em None; o
motivo fica disponível nas variantes `*_result` (MailChimpResult) e nos logs.

A lista corrente (set_list) é estado mutável: para uso concorrente, passe
`list_id=` explicitamente em cada chamada.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.mailchimp.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.mailchimp.mailchimp_errors import (
    MailChimpFailure,
    MailChimpResult,
    is_success_status,
    parse_mailchimp_error,
)
from api.connectors.mailchimp.mailchimp_logging import (
    log_api_error,
    log_failure,
    log_success,
)
from api.payload_builders.mailchimp import (
    build_subscribe_payload,
    build_unsubscribe_payload,
    resolve_language,
)
from api.validators.mailchimp import is_valid_email, member_hash
from config.settings.mailchimp import MAILCHIMP_API_HOST, MAILCHIMP_API_VERSION
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from config.settings import MailChimpSettings

logger: logging.Logger = logging.getLogger(__name__)

_AUTH_USERNAME = "apikey"


def _split_api_key(api_key: str | None) -> tuple[str, str]:
    """Separa a API key em (key, data_center).

    Raises:
        ConfigurationError: Se a key estiver ausente ou sem o sufixo -<dc>.
    """
    if not api_key or not api_key.strip():
        raise ConfigurationError("MAILCHIMP_API_KEY não configurado")
    key, sep, dc = api_key.strip().rpartition("-")
    if not sep or not key or not dc:
        raise ConfigurationError("MAILCHIMP_API_KEY inválido (esperado <key>-<dc>)")
    return key, dc


class MailChimpConnector:
    """Cliente dos endpoints de membros de lista do MailChimp."""

    def __init__(
        self,
        settings: MailChimpSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Inicializa o conector.

        Args:
            settings: Configuração explícita (API key, listas, locale)
            transport: Transport httpx opcional (ex: MockTransport em testes)

        Raises:
            ConfigurationError: Se a API key estiver ausente ou mal-formada.
        """
        _, dc = _split_api_key(settings.api_key)
        api_key = settings.api_key.strip()
        self._settings = settings
        self._list: str | None = None
        self._http = HttpClient(
            HttpClientConfig(
                base_url=f"https://{dc}.{MAILCHIMP_API_HOST}/{MAILCHIMP_API_VERSION}/",
                timeout_seconds=settings.request_timeout_seconds,
                default_headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                auth=(_AUTH_USERNAME, api_key),
                verify_ssl=settings.verify_ssl,
            ),
            transport=transport,
        )

    # Seleção de lista

    def get_list(self) -> str | None:
        """Retorna o ID da lista corrente."""
        return self._list

    def set_list(self, name: str) -> MailChimpConnector:
        """Define o ID da lista corrente. Sem IO."""
        self._list = name
        return self

    def set_list_from_key(self, key: str) -> MailChimpConnector:
        """Seleciona a lista pelo nome lógico configurado em settings.lists.

        Key desconhecida limpa a seleção; chamadas seguintes devolvem None.
        """
        list_id = self._settings.lists.get(key)
        if list_id is None:
            logger.warning("mailchimp_list_key_unknown", extra={"list_key": key})
            self._list = None
            return self
        return self.set_list(list_id)

    # Operações públicas (resultado nulo em qualquer falha)

    def status(self, email: str, *, list_id: str | None = None) -> dict[str, Any] | None:
        """Retorna o membro da lista ou None."""
        return self.status_result(email, list_id=list_id).data

    def subscribe(
        self,
        email: str,
        fields: Mapping[str, Any] | None = None,
        language: str | None = None,
        ip: str | None = None,
        *,
        list_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Inscreve o email na lista; retorna o membro criado ou None."""
        return self.subscribe_result(email, fields, language, ip, list_id=list_id).data

    def unsubscribe(self, email: str, *, list_id: str | None = None) -> dict[str, Any] | None:
        """Marca o membro como unsubscribed; retorna o membro ou None."""
        return self.unsubscribe_result(email, list_id=list_id).data

    def delete(self, email: str, *, list_id: str | None = None) -> dict[str, Any] | None:
        """Remove o membro da lista.

        O MailChimp responde 204 sem corpo; nesse caso o retorno é None
        mesmo em sucesso. Use delete_result para distinguir.
        """
        return self.delete_result(email, list_id=list_id).data

    # Variantes com resultado tipado

    def status_result(self, email: str, *, list_id: str | None = None) -> MailChimpResult:
        return self._member_call("GET", email, list_id)

    def subscribe_result(
        self,
        email: str,
        fields: Mapping[str, Any] | None = None,
        language: str | None = None,
        ip: str | None = None,
        *,
        list_id: str | None = None,
    ) -> MailChimpResult:
        target = list_id if list_id is not None else self._list
        failure = self._precheck(email, target)
        if failure is not None:
            log_failure(failure, "POST", target)
            return MailChimpResult.failed(failure)

        payload = build_subscribe_payload(
            email,
            fields=fields,
            language=resolve_language(language, self._settings.default_locale),
            ip=ip,
        )
        return self._send("POST", f"lists/{target}/members/", target, payload)

    def unsubscribe_result(self, email: str, *, list_id: str | None = None) -> MailChimpResult:
        return self._member_call("PATCH", email, list_id, build_unsubscribe_payload())

    def delete_result(self, email: str, *, list_id: str | None = None) -> MailChimpResult:
        return self._member_call("DELETE", email, list_id)

    # Internos

    def _member_call(
        self,
        method: str,
        email: str,
        list_id: str | None,
        payload: dict[str, Any] | None = None,
    ) -> MailChimpResult:
        """Executa chamada sobre lists/{list}/members/{hash}."""
        target = list_id if list_id is not None else self._list
        failure = self._precheck(email, target)
        if failure is not None:
            log_failure(failure, method, target)
            return MailChimpResult.failed(failure)

        path = f"lists/{target}/members/{member_hash(email)}"
        return self._send(method, path, target, payload)

    def _precheck(self, email: str, list_id: str | None) -> MailChimpFailure | None:
        if not self._settings.enabled:
            return MailChimpFailure.DISABLED
        if not is_valid_email(email):
            return MailChimpFailure.INVALID_EMAIL
        if not list_id:
            return MailChimpFailure.MISSING_LIST
        return None

    def _send(
        self,
        method: str,
        path: str,
        list_id: str,
        payload: dict[str, Any] | None = None,
    ) -> MailChimpResult:
        try:
            response = self._http.request(method, path, json=payload)
        except HttpError as exc:
            log_failure(MailChimpFailure.TRANSPORT_ERROR, method, list_id)
            logger.debug("mailchimp_transport_error", extra={"reason": str(exc)})
            return MailChimpResult.failed(MailChimpFailure.TRANSPORT_ERROR)

        result = self.process_response(response)
        if result.ok:
            log_success(method, list_id, response.status_code)
        else:
            self._log_response_failure(response, result, method, list_id)
        return result

    @staticmethod
    def process_response(response: httpx.Response) -> MailChimpResult:
        """Converte a resposta em MailChimpResult.

        2xx: corpo JSON decodificado (None para corpo vazio).
        Qualquer outro status: falha http_status, sem distinguir 4xx de 5xx.
        """
        code = response.status_code
        if not is_success_status(code):
            return MailChimpResult.failed(MailChimpFailure.HTTP_STATUS, status_code=code)

        if not response.content.strip():
            return MailChimpResult(data=None, status_code=code)

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return MailChimpResult.failed(MailChimpFailure.INVALID_RESPONSE, status_code=code)

        if not isinstance(data, dict):
            return MailChimpResult.failed(MailChimpFailure.INVALID_RESPONSE, status_code=code)
        return MailChimpResult(data=data, status_code=code)

    @staticmethod
    def _log_response_failure(
        response: httpx.Response,
        result: MailChimpResult,
        method: str,
        list_id: str,
    ) -> None:
        if result.failure is None:
            return
        if result.failure is MailChimpFailure.HTTP_STATUS:
            try:
                api_error = parse_mailchimp_error(response.json(), response.status_code)
            except (json.JSONDecodeError, UnicodeDecodeError):
                api_error = None
            if api_error is not None:
                log_api_error(api_error, method, list_id)
        log_failure(result.failure, method, list_id, result.status_code)

    # Ciclo de vida

    def close(self) -> None:
        """Libera o cliente HTTP."""
        self._http.close()

    def __enter__(self) -> MailChimpConnector:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_mailchimp_connector(
    settings: MailChimpSettings | None = None,
) -> MailChimpConnector:
    """Factory para criar o conector com config padrão.

    Args:
        settings: MailChimpSettings opcional. Se None, carrega do ambiente.

    Returns:
        Conector configurado.

    Raises:
        ConfigurationError: Se a API key do ambiente for inválida.
    """
    # Import local para evitar dependência circular
    from config.settings import get_mailchimp_settings

    return MailChimpConnector(settings or get_mailchimp_settings())

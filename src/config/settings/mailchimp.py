"""Settings de integração com MailChimp (API v3).

Centralizar a leitura de env aqui evita que o conector dependa de
configuração global; o conector recebe sempre uma instância explícita.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from utils.errors import ConfigurationError

# Constantes da API MailChimp
MAILCHIMP_API_VERSION: str = "3.0"
MAILCHIMP_API_HOST: str = "api.mailchimp.com"


class MailChimpSettings(BaseModel):
    """Configurações usadas pelo conector MailChimp."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    api_key: str = Field(
        default="",
        description="API key no formato <key>-<dc>.",
    )
    lists: dict[str, str] = Field(
        default_factory=dict,
        description="Mapeamento nome lógico -> ID da lista (audience).",
    )
    default_locale: str | None = Field(
        default=None,
        description="Locale padrão do app (ex: pt_BR) usado no subscribe.",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout de cada requisição HTTP.",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Valida certificado TLS do host MailChimp.",
    )
    enabled: bool = Field(
        default=True,
        description="Feature flag; desligado, nenhuma chamada de rede é feita.",
    )

    def validation_errors(self) -> list[str]:
        """Valida configurações mínimas de MailChimp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("MAILCHIMP_API_KEY não configurado")
        else:
            key, sep, dc = self.api_key.rpartition("-")
            if not sep or not key or not dc:
                errors.append("MAILCHIMP_API_KEY inválido (esperado <key>-<dc>)")

        empty = sorted(name for name, list_id in self.lists.items() if not list_id)
        if empty:
            errors.append(f"MAILCHIMP_LISTS com IDs vazios: {', '.join(empty)}")

        return errors


def _parse_lists(raw: str) -> dict[str, str]:
    """Converte MAILCHIMP_LISTS em dict.

    Aceita JSON (`{"newsletter": "abc123"}`) ou pares `nome=id` separados
    por vírgula.

    Raises:
        ConfigurationError: Se o JSON for mal-formado ou não for um objeto.
    """
    raw = raw.strip()
    if not raw:
        return {}
    if raw.startswith("{"):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigurationError("MAILCHIMP_LISTS não é um JSON válido") from exc
        if not isinstance(data, dict):
            raise ConfigurationError("MAILCHIMP_LISTS deve ser um objeto JSON")
        return {str(name): str(list_id) for name, list_id in data.items()}

    lists: dict[str, str] = {}
    for item in raw.split(","):
        name, sep, list_id = item.partition("=")
        if sep and name.strip():
            lists[name.strip()] = list_id.strip()
    return lists


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_timeout(raw: str) -> float:
    """Converte MAILCHIMP_REQUEST_TIMEOUT_SECONDS em float positivo."""
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"MAILCHIMP_REQUEST_TIMEOUT_SECONDS inválido: {raw!r}"
        ) from exc
    if timeout <= 0:
        raise ConfigurationError("MAILCHIMP_REQUEST_TIMEOUT_SECONDS deve ser positivo")
    return timeout


def _load_mailchimp_from_env() -> MailChimpSettings:
    """Carrega MailChimpSettings a partir de variáveis de ambiente.

    Raises:
        ConfigurationError: Se alguma variável estiver mal-formada.
    """
    return MailChimpSettings(
        api_key=os.getenv("MAILCHIMP_API_KEY", "").strip(),
        lists=_parse_lists(os.getenv("MAILCHIMP_LISTS", "")),
        default_locale=(
            _read_optional_env("MAILCHIMP_DEFAULT_LOCALE")
            or _read_optional_env("APP_DEFAULT_LOCALE")
        ),
        request_timeout_seconds=_parse_timeout(
            os.getenv("MAILCHIMP_REQUEST_TIMEOUT_SECONDS", "10")
        ),
        verify_ssl=_parse_bool(os.getenv("MAILCHIMP_VERIFY_SSL", "true")),
        enabled=_parse_bool(os.getenv("MAILCHIMP_ENABLED", "true")),
    )


@lru_cache(maxsize=1)
def get_mailchimp_settings() -> MailChimpSettings:
    """Retorna instância cacheada de MailChimpSettings."""
    return _load_mailchimp_from_env()


__all__ = [
    "MAILCHIMP_API_HOST",
    "MAILCHIMP_API_VERSION",
    "MailChimpSettings",
    "get_mailchimp_settings",
]

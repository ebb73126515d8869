"""Erros, resultado tipado e parsing de respostas da API MailChimp."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class MailChimpFailure(StrEnum):
    """Motivo pelo qual uma operação não produziu resultado."""

    DISABLED = "disabled"
    INVALID_EMAIL = "invalid_email"
    MISSING_LIST = "missing_list"
    TRANSPORT_ERROR = "transport_error"
    HTTP_STATUS = "http_status"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class MailChimpResult:
    """Resultado de uma operação do conector.

    Attributes:
        data: JSON decodificado da resposta 2xx (None se corpo vazio ou falha)
        failure: Motivo da falha; None em sucesso
        status_code: Status HTTP quando houve resposta
    """

    data: dict[str, Any] | None = None
    failure: MailChimpFailure | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(
        cls,
        failure: MailChimpFailure,
        status_code: int | None = None,
    ) -> MailChimpResult:
        return cls(data=None, failure=failure, status_code=status_code)


@dataclass(frozen=True)
class MailChimpApiError:
    """Erro retornado pela API MailChimp (problem detail)."""

    error_type: str
    title: str
    status: int
    detail: str


def is_success_status(status_code: int) -> bool:
    """2xx é sucesso; 4xx e 5xx não são diferenciados."""
    return 200 <= status_code < 300


def parse_mailchimp_error(
    response_data: Any,
    status_code: int,
) -> MailChimpApiError | None:
    """Extrai o problem detail de um corpo de erro do MailChimp.

    Args:
        response_data: JSON decodificado do corpo (qualquer tipo)
        status_code: Status HTTP da resposta

    Returns:
        MailChimpApiError se o corpo tiver o formato esperado, None caso contrário
    """
    if not isinstance(response_data, dict) or "title" not in response_data:
        return None

    status = response_data.get("status", status_code)
    return MailChimpApiError(
        error_type=str(response_data.get("type", "unknown")),
        title=str(response_data.get("title", "")),
        status=status if isinstance(status, int) else status_code,
        detail=str(response_data.get("detail", "")),
    )

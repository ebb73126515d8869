"""Helpers de logging para API MailChimp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .mailchimp_errors import MailChimpApiError, MailChimpFailure

logger = logging.getLogger(__name__)


def log_api_error(
    api_error: MailChimpApiError,
    method: str,
    list_id: str,
) -> None:
    """Loga erro da API sem expor email ou API key."""
    logger.warning(
        "mailchimp_api_error",
        extra={
            "method": method,
            "list_id": list_id,
            "status_code": api_error.status,
            "error_type": api_error.error_type,
            "error_title": api_error.title,
        },
    )


def log_failure(
    failure: MailChimpFailure,
    method: str,
    list_id: str | None,
    status_code: int | None = None,
) -> None:
    """Loga operação que terminou sem resultado."""
    logger.info(
        "mailchimp_request_failed",
        extra={
            "method": method,
            "list_id": list_id or "",
            "failure": str(failure),
            "status_code": status_code,
        },
    )


def log_success(
    method: str,
    list_id: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "mailchimp_request_ok",
        extra={
            "method": method,
            "list_id": list_id,
            "status_code": status_code,
        },
    )

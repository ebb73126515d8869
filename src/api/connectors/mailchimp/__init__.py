"""Conector MailChimp - adapter de borda para a API v3 (membros de lista).

Este módulo é o único ponto de IO com o MailChimp.
Responsabilidades:
- Cliente HTTP com Basic auth derivado da API key
- Operações status/subscribe/unsubscribe/delete
- Resultado tipado e parsing de erros da API
"""

from .connector import MailChimpConnector, create_mailchimp_connector
from .http_base import HttpClient, HttpClientConfig, HttpError
from .mailchimp_errors import (
    MailChimpApiError,
    MailChimpFailure,
    MailChimpResult,
    is_success_status,
    parse_mailchimp_error,
)

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "MailChimpApiError",
    "MailChimpConnector",
    "MailChimpFailure",
    "MailChimpResult",
    "create_mailchimp_connector",
    "is_success_status",
    "parse_mailchimp_error",
]

"""Payloads de membro (subscribe/unsubscribe) para a API MailChimp."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.mailchimp import is_valid_ip

if TYPE_CHECKING:
    from collections.abc import Mapping

SUBSCRIBED = "subscribed"
UNSUBSCRIBED = "unsubscribed"


def resolve_language(language: str | None, default_locale: str | None) -> str | None:
    """Resolve o código de idioma enviado ao MailChimp.

    Usa `language` ou, na falta dele, `default_locale`; de um locale
    como `pt_BR` fica apenas `pt`.

    Returns:
        Código de idioma ou None quando não há nada a enviar.
    """
    chosen = language or default_locale
    if not chosen:
        return None
    code = chosen.split("_", 1)[0]
    return code or None


def build_subscribe_payload(
    email: str,
    fields: Mapping[str, Any] | None = None,
    language: str | None = None,
    ip: str | None = None,
) -> dict[str, Any]:
    """Constrói o corpo do POST lists/{list}/members/.

    Args:
        email: Email do assinante (já validado)
        fields: Merge fields da lista (omitido se vazio)
        language: Código de idioma já resolvido
        ip: IP do assinante; descartado sem erro se inválido

    Returns:
        Payload JSON do membro
    """
    payload: dict[str, Any] = {
        "email_address": email,
        "status": SUBSCRIBED,
    }
    if fields:
        payload["merge_fields"] = dict(fields)
    if language:
        payload["language"] = language
    if ip and is_valid_ip(ip):
        payload["ip_signup"] = ip
        payload["ip_opt"] = ip
    return payload


def build_unsubscribe_payload() -> dict[str, Any]:
    """Corpo do PATCH que marca o membro como descadastrado."""
    return {"status": UNSUBSCRIBED}

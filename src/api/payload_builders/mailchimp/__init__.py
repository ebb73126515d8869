"""Builders de payload para API MailChimp v3 (membros de lista)."""

from api.payload_builders.mailchimp.member import (
    SUBSCRIBED,
    UNSUBSCRIBED,
    build_subscribe_payload,
    build_unsubscribe_payload,
    resolve_language,
)

__all__ = [
    "SUBSCRIBED",
    "UNSUBSCRIBED",
    "build_subscribe_payload",
    "build_unsubscribe_payload",
    "resolve_language",
]

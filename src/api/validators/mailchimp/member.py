"""Validação de email/IP e identificador de membro do MailChimp."""

from __future__ import annotations

import hashlib
import ipaddress

from email_validator import EmailNotValidError, validate_email


def is_valid_email(email: str | None) -> bool:
    """Retorna True se o email tem formato RFC válido.

    Apenas sintaxe: não consulta DNS (check_deliverability=False).
    """
    if not email or not isinstance(email, str):
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_ip(ip: str | None) -> bool:
    """Retorna True para endereços IPv4 ou IPv6 válidos."""
    if not ip or not isinstance(ip, str):
        return False
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        return False
    return True


def member_hash(email: str) -> str:
    """Identificador do membro: MD5 hex do email em minúsculas."""
    return hashlib.md5(email.lower().encode("utf-8")).hexdigest()

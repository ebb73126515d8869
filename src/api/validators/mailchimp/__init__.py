"""Validators para MailChimp — checagens feitas antes de qualquer IO."""

from api.validators.mailchimp.member import (
    is_valid_email,
    is_valid_ip,
    member_hash,
)

__all__ = [
    "is_valid_email",
    "is_valid_ip",
    "member_hash",
]

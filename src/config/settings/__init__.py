"""Agregador de settings do conector MailChimp.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# MailChimp settings
from config.settings.mailchimp import (
    MAILCHIMP_API_HOST,
    MAILCHIMP_API_VERSION,
    MailChimpSettings,
    get_mailchimp_settings,
)

__all__ = [
    # Constants
    "MAILCHIMP_API_HOST",
    "MAILCHIMP_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # MailChimp
    "MailChimpSettings",
    "get_base_settings",
    "get_mailchimp_settings",
]
